import json

import pytest
import requests


class FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code


@pytest.fixture
def fake_get(monkeypatch):
    """
    Replaces requests.get. Call it with the body to serve;
    every call made is recorded on the returned list.
    """
    calls = []

    def install(body, status_code=200, exc=None):
        if isinstance(body, (dict, list)):
            body = json.dumps(body).encode("utf-8")
        elif isinstance(body, str):
            body = body.encode("utf-8")

        def _get(url, timeout=None):
            calls.append({"url": url, "timeout": timeout})
            if exc is not None:
                raise exc
            return FakeResponse(body, status_code)

        monkeypatch.setattr(requests, "get", _get)
        return calls

    return install
