import json

import pytest
import requests


class FakeResponse():
    def __init__(self, body, status_code=200):
        self.status_code = status_code
        self._body = body

    def json(self):
        if isinstance(self._body, str):
            return json.loads(self._body)
        return self._body


class FakeNode():
    '''
    Stands in for requests.post. Each queued reply is either a FakeResponse
    or an exception instance to raise.
    '''

    def __init__(self):
        self.replies = []
        self.calls = []

    def reply_height(self, hex_height):
        self.replies.append(FakeResponse({"jsonrpc": "2.0", "result": hex_height, "id": 1}))

    def reply(self, body, status_code=200):
        self.replies.append(FakeResponse(body, status_code))

    def fail(self, exc):
        self.replies.append(exc)

    def __call__(self, url, headers=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout, **kwargs})
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def fake_node(monkeypatch):
    node = FakeNode()
    monkeypatch.setattr(requests, "post", node)
    return node


@pytest.fixture
def connection_refused():
    return requests.exceptions.ConnectionError("Connection refused")
