import json

import mongomock
import pytest
from fastapi.testclient import TestClient

from config import Settings
from db import CourseStore
from main import create_app
from tests.helpers import SAMPLE_CURRICULUM


@pytest.fixture
def collection():
    return mongomock.MongoClient()["mongo-test"]["courses"]


@pytest.fixture
def store(collection):
    return CourseStore(collection)


@pytest.fixture
def write_curriculum(tmp_path):
    def _write(data, name="courses.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_client(write_curriculum, store):
    def _make(data=None, store_factory=None):
        path = write_curriculum(SAMPLE_CURRICULUM if data is None else data)
        settings = Settings(courses_file=path, allowed_origins=["*"])
        app = create_app(settings, store_factory=store_factory or (lambda s: store))
        return TestClient(app)

    return _make
