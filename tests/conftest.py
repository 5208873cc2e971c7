import pytest
from rest_framework.test import APIClient

from grades.models import Grade


class StubPhotoService:
    """Photo provider returning ``count`` numbered images."""

    def __init__(self, count):
        self.count = count

    def get_data(self):
        return [{'itemImageSrc': f"https://example.test/photo{i}.jpg"} for i in range(self.count)]


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def grade(db):
    return Grade.objects.create(name='Grade 3', code='G3', display_order=3)


@pytest.fixture
def other_grade(db):
    return Grade.objects.create(name='Grade 4', code='G4', display_order=4)
