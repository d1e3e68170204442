import teachable_dashboard.bootstrap_env  # must be first to set env/secrets
import logging

import streamlit as st

from teachable_dashboard.config import PAGE_TITLE, load_settings
from teachable_dashboard.data.loader import clear_caches
from teachable_dashboard.errors import ConfigurationError
from teachable_dashboard.ui.layout import setup_page, sidebar
from teachable_dashboard.ui.pages import courses
from teachable_dashboard.ui.session import get_dashboard_state

logger = logging.getLogger(__name__)


def main() -> None:
    setup_page()

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        # Nothing can be fetched without an API key; refuse to go further.
        st.error(str(exc))
        st.stop()

    logging.basicConfig(level=settings.log_level)

    state = get_dashboard_state(settings)
    if sidebar(settings):
        logger.info("refreshing cached Teachable data")
        clear_caches()
        state.invalidate()

    st.title(PAGE_TITLE)
    courses.render(state)


if __name__ == "__main__":
    main()
