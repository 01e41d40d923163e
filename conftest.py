"""Root conftest for pytest configuration and shared fixtures.

This conftest is loaded before both testpaths (tests/ and tracklane/),
making its fixtures available to centralized tests AND colocated tests.
"""

import os

import pytest

# ---------------------------------------------------------------------------
# Environment variables: must be set before any tracklane module import
# Uses setdefault so real env vars (CI) are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("TRACKING_POLICY", "single")
os.environ.setdefault("TRACKING_PROVIDERS", "internal")


# ---------------------------------------------------------------------------
# Shared fake fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def journal():
    """Shared list that fake emitters and wrapper actions append to, in call order."""
    return []


@pytest.fixture
def fake_emitter(journal):
    """FakeEmitter named 'fake' writing to the shared journal."""
    from tracklane.adapters.providers.fake import FakeEmitter

    return FakeEmitter("fake", journal=journal)


@pytest.fixture
def fake_metrics():
    """Fake DispatchMetrics that records counter increments."""
    from tracklane.adapters.metrics.fake import FakeDispatchMetrics

    return FakeDispatchMetrics()


@pytest.fixture
def event():
    """The canonical signup event."""
    from tracklane.core.events import Event

    return Event(name="UserSignup", payload="{userId:42}")
