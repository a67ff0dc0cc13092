import os

import pytest

# pygame never opens a window in the tests, only off-screen surfaces
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from particle import Particle


@pytest.fixture
def falling():
    """Particle at rest at the origin, no aging, no trail"""
    return Particle(mass=1.0, lifespan=None, color=(255, 0, 0))


@pytest.fixture
def trailed():
    return Particle(mass=1.0, lifespan=None, color=(0, 255, 0), track_trail=True)
