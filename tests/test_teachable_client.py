import json

import pytest
import requests

from teachable_dashboard.api.teachable import TeachableClient
from teachable_dashboard.errors import ConfigurationError, TeachableAPIError
from tests.fakes import API_KEY, BASE_URL, FakeResponse, FakeSession


def test_fetch_students_returns_body_unmodified(client, students_payload):
    assert client.fetch_students() == students_payload


def test_fetch_courses_returns_body_unmodified(client, courses_payload):
    assert client.fetch_courses() == courses_payload


def test_fetch_students_in_course_returns_body_unmodified(client, enrollments_payload):
    assert client.fetch_students_in_course("1") == enrollments_payload


def test_extra_fields_are_passed_through():
    payload = {"courses": [{"id": "9", "name": "X", "unexpected": {"nested": True}}], "meta": {"total": 1}}
    session = FakeSession(routes={f"{BASE_URL}/courses": FakeResponse(payload=payload)})
    client = TeachableClient(API_KEY, base_url=BASE_URL, session=session)

    assert client.fetch_courses() == payload


@pytest.mark.parametrize(
    "method, args, path, message",
    [
        ("fetch_students", (), "/users", "Failed to fetch students"),
        ("fetch_courses", (), "/courses", "Failed to fetch courses"),
        ("fetch_students_in_course", ("1",), "/courses/1/enrollments", "Failed to fetch course enrollments"),
    ],
)
@pytest.mark.parametrize("status_code", [302, 401, 500])
def test_non_success_status_raises_fixed_message(method, args, path, message, status_code):
    session = FakeSession(routes={f"{BASE_URL}{path}": FakeResponse(status_code=status_code, payload={"detail": "x"})})
    client = TeachableClient(API_KEY, base_url=BASE_URL, session=session)

    with pytest.raises(TeachableAPIError) as exc_info:
        getattr(client, method)(*args)

    assert str(exc_info.value) == message
    assert exc_info.value.status_code == status_code
    assert exc_info.value.endpoint == path


@pytest.mark.parametrize("status_code", [200, 201, 204])
def test_any_2xx_is_success(status_code):
    session = FakeSession(routes={f"{BASE_URL}/users": FakeResponse(status_code=status_code, payload={"users": []})})
    client = TeachableClient(API_KEY, base_url=BASE_URL, session=session)

    assert client.fetch_students() == {"users": []}


def test_every_request_carries_api_key_and_accept_header(client, fake_session):
    client.fetch_students()
    client.fetch_courses()
    client.fetch_students_in_course("1")

    assert len(fake_session.calls) == 3
    for call in fake_session.calls:
        assert call["headers"]["apikey"] == API_KEY
        assert call["headers"]["accept"] == "application/json"


def test_course_id_is_interpolated_into_path_as_is(client, fake_session):
    with pytest.raises(TeachableAPIError):
        client.fetch_students_in_course("a b/c")

    assert fake_session.calls[0]["url"] == f"{BASE_URL}/courses/a b/c/enrollments"


@pytest.mark.parametrize("api_key", [None, ""])
def test_missing_api_key_fails_at_construction(api_key):
    with pytest.raises(ConfigurationError):
        TeachableClient(api_key, session=FakeSession())


def test_transport_errors_propagate_unmodified():
    error = requests.ConnectionError("network unreachable")
    client = TeachableClient(API_KEY, base_url=BASE_URL, session=FakeSession(error=error))

    with pytest.raises(requests.ConnectionError) as exc_info:
        client.fetch_courses()

    assert exc_info.value is error


def test_malformed_body_propagates_decode_error():
    session = FakeSession(routes={f"{BASE_URL}/users": FakeResponse(text="<html>oops</html>")})
    client = TeachableClient(API_KEY, base_url=BASE_URL, session=session)

    with pytest.raises(json.JSONDecodeError):
        client.fetch_students()


def test_no_timeout_by_default(client, fake_session):
    client.fetch_courses()

    assert fake_session.calls[0]["timeout"] is None


def test_context_manager_closes_owned_session(monkeypatch):
    closed = []
    with TeachableClient(API_KEY, base_url=BASE_URL) as client:
        monkeypatch.setattr(client.session, "close", lambda: closed.append(True))

    assert closed == [True]


def test_injected_session_is_left_open(fake_session):
    with TeachableClient(API_KEY, base_url=BASE_URL, session=fake_session) as client:
        client.fetch_courses()

    assert not fake_session.closed
