"""Pytest configuration and shared fixtures for estimator tests."""

import os
import sys
import pytest


# ============================================================================
# Ensure local imports work (config/, models/, services/, utils/)
# ============================================================================
#
# The codebase uses absolute imports like `from models...` / `from services...`,
# so the repository root must be importable as the top-level module root.
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from config.settings import Settings  # noqa: E402
from models.estimate_range import Range  # noqa: E402
from services.project_state import EstimateProject  # noqa: E402


# ============================================================================
# Range Fixtures
# ============================================================================

@pytest.fixture
def zero_range() -> Range:
    """All-zero range."""
    return Range.zero()


@pytest.fixture
def ten_percent() -> Range:
    """10% in every band."""
    return Range.uniform(10)


# ============================================================================
# Project Fixtures
# ============================================================================

@pytest.fixture
def test_settings(monkeypatch) -> Settings:
    """Settings with deterministic values, independent of the host environment."""
    monkeypatch.setenv("ESTIMATE_APP_NAME", "Test Addition")
    monkeypatch.setenv("ESTIMATE_EXPORT_PREFIX", "Test-Addition")
    monkeypatch.setenv("ESTIMATE_APPLY_MODE", "HARD_ONLY")
    return Settings()


@pytest.fixture
def seeded_project(test_settings) -> EstimateProject:
    """Fresh seeded project per test."""
    return EstimateProject.from_seed(test_settings)
