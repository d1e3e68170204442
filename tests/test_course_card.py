from teachable_dashboard.data.queries import QueryResult
from teachable_dashboard.ui.components.course_card import build_course_card, build_course_list
from teachable_dashboard.ui.components.formatting import decode_html


def _course(**overrides):
    course = {
        "id": "123",
        "name": "Test Course",
        "image_url": "https://example.com/image.jpg",
        "heading": "Test Heading",
        "is_published": True,
        "description": "Test Description",
    }
    course.update(overrides)
    return course


def test_card_shows_name_image_and_heading():
    card = build_course_card(_course())

    assert card.title == "Test Course"
    assert card.image_url == "https://example.com/image.jpg"
    assert card.subtitle == "Test Heading"


def test_empty_heading_suppresses_only_subtitle():
    card = build_course_card(_course(heading=""))

    assert card.subtitle is None
    assert card.title == "Test Course"
    assert card.image_url == "https://example.com/image.jpg"


def test_empty_image_url_suppresses_only_image():
    card = build_course_card(_course(image_url=""))

    assert card.image_url is None
    assert card.title == "Test Course"
    assert card.subtitle == "Test Heading"


def test_card_text_is_html_decoded():
    card = build_course_card(_course(name="Tips &amp; Tricks", heading="<p>Learn &quot;fast&quot;</p>"))

    assert card.title == "Tips & Tricks"
    assert card.subtitle == 'Learn "fast"'


def test_card_keeps_course_for_selection():
    course = _course()

    assert build_course_card(course).course is course


def test_empty_course_list_is_reported_as_empty():
    view = build_course_list(QueryResult(key="courses", data={"courses": []}))

    assert view.is_empty
    assert view.cards == []
    assert not view.is_loading


def test_loading_list_is_not_empty():
    view = build_course_list(QueryResult(key="courses", is_loading=True))

    assert view.is_loading
    assert not view.is_empty


def test_unfetched_list_is_not_empty():
    view = build_course_list(QueryResult(key="courses"))

    assert not view.is_empty
    assert not view.is_loading
    assert view.cards == []


def test_error_message_is_surfaced():
    view = build_course_list(QueryResult(key="courses", error=RuntimeError("Failed to fetch courses")))

    assert view.error_message == "Failed to fetch courses"
    assert not view.is_empty


def test_one_card_per_course(courses_payload):
    view = build_course_list(QueryResult(key="courses", data=courses_payload))

    assert [card.title for card in view.cards] == ["React Basics", "Advanced TypeScript"]


def test_decode_html_handles_plain_and_missing_text():
    assert decode_html("Plain text") == "Plain text"
    assert decode_html(None) == ""
    assert decode_html("") == ""
