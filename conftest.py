import pytest
import requests


@pytest.fixture(autouse=True)
def isolated_cache(tmp_path, monkeypatch):
    path = tmp_path / "wikr_cache.json"
    monkeypatch.setenv("WIKR_CACHE_PATH", str(path))
    monkeypatch.delenv("WIKR_DEBUG", raising=False)
    return path


class FakeResponse:
    def __init__(self, payload=None, status=200, text=None):
        self.payload = payload
        self.status_code = status
        self.text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")

    def json(self):
        if self.text is not None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """Records GETs and answers them in order."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, params=None):
        self.calls.append((url, params))
        res = self.responses.pop(0)
        if isinstance(res, Exception):
            raise res
        return res


@pytest.fixture
def fake_http(monkeypatch):
    import fetch_wikipedia

    def install(*responses):
        session = FakeSession(*responses)
        monkeypatch.setattr(fetch_wikipedia, "_get_session", lambda: session)
        return session

    return install
