"""
Shared fixtures: catalog payloads, stub sources and canned HTTP responses.
"""
import json
from typing import List

import pytest
import requests

from harvestdoc.ports.sources import CatalogSource
from harvestdoc.schemas.concept import Concept, decode_concepts


PATIENT_CATALOG = [
    {
        "id": 1,
        "name": "Patient",
        "category": {"id": 1, "name": "Demographics"},
        "fields": [
            {"pk": 1, "name": "Age", "description": " years old "},
            {"pk": 2, "name": "Sex", "description": "M/F"},
        ],
    }
]

PATIENT_CSV = (
    "Field,Concept,Category,Description\n"
    "Age,Patient,Demographics,years old\n"
    "Sex,Patient,Demographics,M/F\n"
)


class StaticSource(CatalogSource):
    """Catalog source returning a fixed list of concepts."""

    def __init__(self, concepts: List[Concept]):
        self._concepts = concepts
        self.closed = False

    def describe(self) -> str:
        return "static"

    def concepts(self) -> List[Concept]:
        return list(self._concepts)

    def close(self) -> None:
        self.closed = True


class FailingSource(CatalogSource):
    """Catalog source that always raises the given error."""

    def __init__(self, error: Exception):
        self.error = error
        self.closed = False

    def describe(self) -> str:
        return "failing"

    def concepts(self) -> List[Concept]:
        raise self.error

    def close(self) -> None:
        self.closed = True


def make_response(
    status_code: int = 200,
    body=b"",
    reason: str = "OK",
    url: str = "http://harvest.example.org/api/concepts/",
) -> requests.Response:
    """Build a fully-read requests.Response without touching the network."""
    if not isinstance(body, (bytes, str)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")

    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = url
    response._content = body
    response._content_consumed = True
    return response


@pytest.fixture
def patient_concepts() -> List[Concept]:
    """The Patient concept with two fields."""
    return decode_concepts(json.dumps(PATIENT_CATALOG))


@pytest.fixture
def catalog_file(tmp_path):
    """Patient catalog saved as a JSON file."""
    path = tmp_path / "concepts.json"
    path.write_text(json.dumps(PATIENT_CATALOG), encoding="utf-8")
    return path


@pytest.fixture
def patient_csv() -> str:
    """Expected CSV for the Patient catalog."""
    return PATIENT_CSV


@pytest.fixture
def http_response():
    """Factory for canned requests.Response objects."""
    return make_response


@pytest.fixture
def static_source():
    """Factory for a source returning fixed concepts."""
    return StaticSource


@pytest.fixture
def failing_source():
    """Factory for a source raising a fixed error."""
    return FailingSource
