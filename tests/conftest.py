"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import os

import pytest
from hypothesis import Verbosity, settings

from orchain import MessageRenderer, RendererConfig
from tests.strategies import CallLog

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def call_log() -> CallLog:
    """Record of validator names in the order they were called."""
    return CallLog()


@pytest.fixture
def renderer() -> MessageRenderer:
    """Renderer with truncation and obscuring disabled, independent of the environment."""
    return MessageRenderer(RendererConfig(message_length=-1, obscure_value=False))
