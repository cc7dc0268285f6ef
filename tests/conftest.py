# tests/conftest.py

import random

import pytest
import requests

from quotebox.controller import QuoteController
from quotebox.services.category_index import CategoryIndex
from quotebox.services.presenter import Presenter
from quotebox.services.quote_store import QuoteStore
from quotebox.services.sync_service import RemoteQuoteClient, SyncAgent
from quotebox.storage.kv import DurableStore, SessionStore


# --- Fakes ---

class FakeSurface:
    def __init__(self):
        self.shown = []
        self.empty_messages = []

    def show_quote(self, text, category):
        self.shown.append((text, category))

    def show_empty(self, message):
        self.empty_messages.append(message)


class FakeResponse:
    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self.payload = payload
        self.status_code = status_code
        self.invalid_json = invalid_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self.invalid_json:
            raise ValueError("not json")
        return self.payload


class FakeHttpSession:
    """Stands in for requests.Session; records every call."""

    def __init__(self, payload=None):
        self.get_response = FakeResponse(payload if payload is not None else [])
        self.get_error = None
        self.post_errors = {}  # index of POST call -> exception
        self.gets = []
        self.posts = []

    def get(self, url, timeout=None):
        self.gets.append(url)
        if self.get_error:
            raise self.get_error
        return self.get_response

    def post(self, url, json=None, timeout=None):
        index = len(self.posts)
        self.posts.append(json)
        if index in self.post_errors:
            raise self.post_errors[index]
        return FakeResponse({"id": index + 1}, status_code=201)


# --- Fixtures ---

@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "quotes.db")


@pytest.fixture
def durable(db_path):
    return DurableStore(db_path)


@pytest.fixture
def session_store():
    return SessionStore()


@pytest.fixture
def store(durable):
    return QuoteStore(durable)


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def presenter(surface, session_store):
    return Presenter(surface, session_store, rng=random.Random(42))


@pytest.fixture
def http():
    return FakeHttpSession()


@pytest.fixture
def agent(store, http):
    client = RemoteQuoteClient("https://example.test/posts", session=http, timeout=1)
    return SyncAgent(store, client, interval=0.05)


@pytest.fixture
def controller(store, durable, presenter, agent):
    return QuoteController(
        store=store,
        index=CategoryIndex(durable),
        presenter=presenter,
        sync=agent,
        sync_on_change=False,
    )


@pytest.fixture
def make_response():
    return FakeResponse
