"""Pytest configuration for conformance tests."""

import pytest
from tests.conformance.runners.library_runner import LibraryRunner


def get_available_runners():
    """Return list of available conformance runners."""
    runners = [LibraryRunner()]
    return runners


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Provide conformance runner for testing.

    This fixture is parametrized to run tests against all available runners.
    Currently includes:
    - library: Uses the bzllib tokenizer and parser in-process
    """
    return request.param
