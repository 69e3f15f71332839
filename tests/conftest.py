"""Shared fixtures for freq tests."""
from __future__ import annotations

import random

import pytest

from freq.domain.state import TallyState

SEED = 42


@pytest.fixture
def state() -> TallyState:
    return TallyState()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(SEED)


@pytest.fixture
def sample_text() -> str:
    """Mixed-script text covering 1- to 4-byte UTF-8 sequences."""
    return "Grüße, 世界! naïve café € ½ ≤ ∞ 🙂\n"
