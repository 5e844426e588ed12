"""
Testing the color source
- Trick: replace requests.get so no test ever touches the network.
"""

import requests

import simon.random_client as random_client
from simon.engine import COLORS


class FakeResponse:
    def __init__(self, text, status=200):
        self.text = text
        self.status = status

    def raise_for_status(self):
        if self.status != 200:
            raise requests.HTTPError(f"status {self.status}")


def test_local_source_returns_a_color():
    for _ in range(20):
        assert random_client.fetch_color("local") in COLORS


def test_random_org_value_maps_to_color(monkeypatch):
    monkeypatch.setattr(random_client.requests, "get", lambda *a, **kw: FakeResponse("2\n"))
    assert random_client.fetch_color("random.org") == "blue"


def test_random_org_failure_falls_back(monkeypatch):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(random_client.requests, "get", boom)
    monkeypatch.setattr(random_client, "_local_index", lambda: 3)
    assert random_client.fetch_color("random.org") == "yellow"


def test_random_org_bad_body_falls_back(monkeypatch):
    monkeypatch.setattr(random_client.requests, "get", lambda *a, **kw: FakeResponse("9\n"))
    monkeypatch.setattr(random_client, "_local_index", lambda: 0)
    assert random_client.fetch_color("random.org") == "red"

    monkeypatch.setattr(random_client.requests, "get", lambda *a, **kw: FakeResponse("", status=503))
    assert random_client.fetch_color("random.org") == "red"
