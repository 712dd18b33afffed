from __future__ import annotations

import pytest
import requests


def make_response(body: str, status: int = 200, content_type: str = "text/csv; charset=utf-8") -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = body.encode("utf-8")
    response.headers["Content-Type"] = content_type
    if "charset=" in content_type:
        response.encoding = content_type.split("charset=", 1)[1]
    return response


class FakeSession:
    def __init__(self, response: requests.Response | None = None, exc: Exception | None = None):
        self.response = response
        self.exc = exc
        self.calls: list[str] = []

    def get(self, url: str) -> requests.Response:
        self.calls.append(url)
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def sample_csv() -> str:
    return "Time,Bus\n7:00 AM,Red\n5:00 PM,Blue"


@pytest.fixture
def csv_response():
    return make_response


@pytest.fixture
def fake_session():
    return FakeSession
