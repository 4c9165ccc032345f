"""Shared test fixtures for the repodoc test suite."""

import pytest

from repodoc.core.config import Settings
from tests.fakes import FakeGitHub, StubLLM


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        jwt_secret="test-secret",
        google_ai_api_key="",
        github_client_id="",
        debug=False,
    )


@pytest.fixture
def fake_github():
    return FakeGitHub()


@pytest.fixture
def stub_llm():
    return StubLLM()


@pytest.fixture
def failing_llm():
    return StubLLM(fail=True)
