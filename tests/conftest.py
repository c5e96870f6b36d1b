import pytest
import requests

from jobgate.apify.client import ActorClient

_NO_JSON = object()


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is _NO_JSON:
            raise ValueError("not json")
        return self._payload


class FakeSession:
    """Stands in for requests.Session: replays queued responses, records calls."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp

    def close(self):
        self.closed = True


class FakeActorClient:
    """Stands in for ActorClient inside tool handlers."""

    def __init__(self, items=None, error=None):
        self.items = items if items is not None else []
        self.error = error
        self.requests = []
        self.closed = False

    async def run(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.items

    def close(self):
        self.closed = True


def ok(payload):
    return FakeResponse(200, payload)


def run_payload(status, run_id="run-1"):
    return ok({"data": {"id": run_id, "status": status, "defaultDatasetId": "ds-1"}})


@pytest.fixture
def make_client():
    def _make(responses, **kwargs):
        session = FakeSession(responses)
        kwargs.setdefault("poll_interval_s", 0)
        client = ActorClient("apify_api_TESTTOKEN", session=session, **kwargs)
        return client, session
    return _make


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
