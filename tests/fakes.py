"""In-memory stand-ins for requests objects, form state and envelopes used across the test suite."""

import json

import requests

from domain.models.response_envelope import ResponseEnvelope


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self._payload = payload
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        if self._payload is None:
            raise requests.exceptions.JSONDecodeError("Expecting value", self.text, 0)
        return self._payload


class FakeSession:
    """Stands in for requests.Session; records every call it receives."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def queue(self, reply):
        self.replies.append(reply)

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, FakeResponse):
            return reply
        return FakeResponse(reply)


class MemoryFormState:
    """FormState backed by a plain dict. Alerts are collected instead of flashed."""

    def __init__(self, values=None):
        self._values = dict(values or {})
        self.alerts = []
        self.focused = None

    def value(self, handle):
        return self._values.get(handle, "")

    def alert(self, message):
        self.alerts.append(message)

    def focus(self, handle):
        self.focused = handle


def success_envelope(data=None, info_message=None):
    return ResponseEnvelope(ifSuccess=True, infoMessage=info_message, status=200, data=data)


def failed_envelope(error_message, status):
    return ResponseEnvelope(ifSuccess=False, errorMessage=error_message, status=status)
