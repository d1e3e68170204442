"""
Keyed query state for the dashboard's fetches.

A `KeyedQuery` wraps one fetch function and remembers the key it was last
asked for. Every fetch is issued under a `Ticket`; when the key changes
before the fetch settles, the late result no longer matches and is dropped.
A query whose key is None is disabled and never calls its fetcher.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Ticket:
    key: Hashable
    generation: int


@dataclass
class QueryResult(Generic[T]):
    key: Optional[Hashable] = None
    data: Optional[T] = None
    error: Optional[Exception] = None
    is_loading: bool = False
    settled: bool = False

    @property
    def is_settled(self) -> bool:
        return self.settled and not self.is_loading


class KeyedQuery(Generic[T]):
    def __init__(self, name: str, fetcher: Callable[[Hashable], T], key: Optional[Hashable] = None) -> None:
        self.name = name
        self.fetcher = fetcher
        self._generation = 0
        self.result: QueryResult[T] = QueryResult(key=key)

    @property
    def key(self) -> Optional[Hashable]:
        return self.result.key

    @property
    def enabled(self) -> bool:
        return self.result.key is not None

    def set_key(self, key: Optional[Hashable]) -> None:
        """Point the query at a new key, invalidating whatever it held."""
        if key == self.result.key:
            return
        self._generation += 1
        self.result = QueryResult(key=key)

    def invalidate(self) -> None:
        """Forget the current result but keep the key."""
        self._generation += 1
        self.result = QueryResult(key=self.result.key)

    def begin(self) -> Ticket:
        if not self.enabled:
            raise RuntimeError(f"query {self.name!r} is disabled")
        self._generation += 1
        self.result = QueryResult(key=self.result.key, is_loading=True)
        return Ticket(key=self.result.key, generation=self._generation)

    def is_current(self, ticket: Ticket) -> bool:
        return ticket.generation == self._generation and ticket.key == self.result.key

    def resolve(self, ticket: Ticket, data: T) -> bool:
        if not self.is_current(ticket):
            logger.debug("discarding stale %s result for key %r", self.name, ticket.key)
            return False
        self.result = QueryResult(key=ticket.key, data=data, settled=True)
        return True

    def reject(self, ticket: Ticket, error: Exception) -> bool:
        if not self.is_current(ticket):
            logger.debug("discarding stale %s error for key %r", self.name, ticket.key)
            return False
        self.result = QueryResult(key=ticket.key, error=error, settled=True)
        return True

    def run(self) -> QueryResult[T]:
        """Fetch for the current key and settle the result.

        Errors from the fetcher are stored on the result unmodified, not raised.
        Disabled queries return their empty result without fetching.
        """
        if not self.enabled:
            return self.result
        ticket = self.begin()
        try:
            data = self.fetcher(ticket.key)
        except Exception as exc:
            logger.warning("%s fetch failed for key %r: %s", self.name, ticket.key, exc)
            self.reject(ticket, exc)
        else:
            self.resolve(ticket, data)
        return self.result

    def ensure(self) -> QueryResult[T]:
        """Fetch only when the current key has no settled result yet."""
        if self.result.is_settled:
            return self.result
        return self.run()
