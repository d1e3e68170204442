import pytest

from teachable_dashboard.api.teachable import TeachableClient
from tests.fakes import API_KEY, BASE_URL, FakeResponse, FakeSession


@pytest.fixture()
def students_payload():
    return {
        "users": [
            {"id": 1, "name": "John Doe", "email": "john@example.com"},
            {"id": 2, "name": "Jane Smith", "email": "jane@example.com"},
        ]
    }


@pytest.fixture()
def courses_payload():
    return {
        "courses": [
            {
                "id": "1",
                "name": "React Basics",
                "image_url": "https://example.com/react.jpg",
                "heading": "Learn React",
                "is_published": True,
            },
            {
                "id": "2",
                "name": "Advanced TypeScript",
                "image_url": "https://example.com/typescript.jpg",
                "heading": "Master TypeScript",
                "is_published": True,
            },
        ]
    }


@pytest.fixture()
def enrollments_payload():
    return {
        "enrollments": [
            {"user_id": 1, "percent_complete": 75},
            {"user_id": 2, "percent_complete": 100},
        ]
    }


@pytest.fixture()
def fake_session(students_payload, courses_payload, enrollments_payload):
    return FakeSession(
        routes={
            f"{BASE_URL}/users": FakeResponse(payload=students_payload),
            f"{BASE_URL}/courses": FakeResponse(payload=courses_payload),
            f"{BASE_URL}/courses/1/enrollments": FakeResponse(payload=enrollments_payload),
        }
    )


@pytest.fixture()
def client(fake_session):
    return TeachableClient(API_KEY, base_url=BASE_URL, session=fake_session)
