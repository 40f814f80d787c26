"""Shared test fixtures for pytest."""
import json
from unittest.mock import patch

import pytest
import requests


def make_response(body, status_code=200):
    """Build a requests.Response with an already-read body."""
    resp = requests.Response()
    resp.status_code = status_code
    if not isinstance(body, (str, bytes)):
        body = json.dumps(body)
    resp._content = body.encode() if isinstance(body, str) else body
    resp._content_consumed = True
    return resp


@pytest.fixture(autouse=True)
def block_http_calls(request):
    """Block real HTTP calls during tests. Autouse ensures this runs for every test.

    Tests marked real_http talk to a local server and are left alone.
    """
    if request.node.get_closest_marker("real_http"):
        yield
        return
    with patch("requests.adapters.HTTPAdapter.send") as mock_send:
        mock_send.side_effect = RuntimeError("HTTP not mocked")
        yield


@pytest.fixture
def mock_post():
    """Mock requests.post as seen by the verification client."""
    with patch("recaptcha.client.requests.post") as mock:
        mock.return_value = make_response({"success": True})
        yield mock


@pytest.fixture
def siteverify(mock_post):
    """Set the JSON body returned by the mocked siteverify endpoint."""

    def respond(body, status_code=200):
        mock_post.return_value = make_response(body, status_code)
        return mock_post

    return respond
