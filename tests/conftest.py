"""Shared fixtures: a stub HTTP session standing in for requests.Session."""

import copy
import json

import pytest
import requests


class StubResponse:
    def __init__(self, body, status_code=200):
        self.status_code = status_code
        self.text = body if isinstance(body, str) else json.dumps(body)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        return json.loads(self.text)


class StubSession:
    """Records POSTs and answers them from a method -> body mapping."""

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.headers = {}
        self.calls = []

    def post(self, url, data=None):
        api_method = url.rsplit('/', 1)[-1]
        self.calls.append((api_method, data))
        answer = self.responses[api_method]
        if isinstance(answer, Exception):
            raise answer
        if isinstance(answer, StubResponse):
            return answer
        return StubResponse(answer)


CHANNELS = [
    {
        "id": "C001",
        "name": "general",
        "is_private": False,
        "num_members": 12,
        "topic": {"value": "Company news", "creator": "U001"},
        "purpose": {"value": "", "creator": ""},
        "pending_shared": [],
    },
    {
        "id": "C002",
        "name": "ops",
        "is_private": True,
        "num_members": 0,
        "topic": {"value": "Pager", "creator": "U002"},
        "purpose": {"value": "On-call", "creator": "U002"},
        "pending_shared": [],
    },
]

USERS = [
    {"id": "U001", "name": "ana", "deleted": False, "profile": {"email": "ana@example.com", "title": "Eng"}},
    {"id": "U002", "name": "bo", "deleted": True, "profile": {"email": "bo@example.com", "title": ""}},
]


@pytest.fixture
def make_session():
    return StubSession


@pytest.fixture
def make_response():
    return StubResponse


@pytest.fixture
def channels():
    return copy.deepcopy(CHANNELS)


@pytest.fixture
def users():
    return copy.deepcopy(USERS)
