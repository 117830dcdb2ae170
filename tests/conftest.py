"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import pytest
from hypothesis import Verbosity, settings

from netter.validation import validators

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture(autouse=True)
def _reset_default_validator(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the module singleton and NETTER_IPV4_MODE from leaking between tests."""
    monkeypatch.delenv("NETTER_IPV4_MODE", raising=False)
    monkeypatch.setattr(validators, "_default_validator", None)
