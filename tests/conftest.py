"""Pytest configuration for the propcheck test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Statistical Test Separation:
Tests marked with @pytest.mark.statistical draw tens of thousands of values
to check distributions. They run by default; skip them with -m "not statistical".
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

import propcheck
from propcheck.core import random_source

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (200 examples, silent)
settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'statistical' marker for distribution tests."""
    config.addinivalue_line(
        "markers",
        "statistical: Distribution tests drawing many values (deselect with -m 'not statistical')",
    )


# =============================================================================
# RANDOM SOURCE ISOLATION
# =============================================================================


@pytest.fixture(autouse=True)
def _fresh_default_source(monkeypatch: pytest.MonkeyPatch) -> None:
    """Give every test its own process-wide RandomSource.

    Tests that reseed the default source must not leak that seed into
    the next test.
    """
    monkeypatch.setattr(random_source, "_default", None)


@pytest.fixture
def source() -> propcheck.RandomSource:
    """RandomSource with a fixed seed, for deterministic tests."""
    return propcheck.RandomSource(seed=20240517)
