import os
import sys

import pytest

# Ensure project root is in sys.path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

# No window is ever opened by the tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pygame

from sparks.constants import CANVAS_HEIGHT, CANVAS_WIDTH


class ScriptedRandom:
    """
    Deterministic stand-in for numpy's Generator.

    Each uniform(low, high) call returns low + f * (high - low), taking f from the
    scripted fractions in order and repeating the last one when they run out.
    """
    def __init__(self, *fractions):
        self.fractions = list(fractions) or [0.5]
        self.calls = []

    def uniform(self, low, high):
        f = self.fractions[min(len(self.calls), len(self.fractions) - 1)]
        self.calls.append((low, high))
        return low + f * (high - low)


@pytest.fixture
def rng():
    """Seeded numpy generator."""
    return np.random.default_rng(1234)


@pytest.fixture
def half_rng():
    """Random source that always returns the midpoint of the requested range."""
    return ScriptedRandom(0.5)


@pytest.fixture
def surface():
    """Off-screen canvas the size of the real one."""
    return pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT))
