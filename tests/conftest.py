"""
Shared pytest fixtures for pokepic tests
"""

import logging

import pytest

from tests.helpers import ONE_TILE_HEADER, run_plane, sprite_bits


@pytest.fixture
def blank_sprite_bits():
    """1x1 sprite whose planes are each a single run of 64 zero pairs"""
    return sprite_bits(ONE_TILE_HEADER, "0", run_plane(64), "01", run_plane(64))


@pytest.fixture
def solid_sprite_bits():
    """1x1 sprite: primary plane all ones (one literal packet), secondary all zeros"""
    return sprite_bits(ONE_TILE_HEADER, "0", "1" + "11" * 32, "01", run_plane(32))


@pytest.fixture(autouse=True)
def reset_pokepic_logger():
    """Drop handlers installed by setup_logger so each test starts clean"""
    yield
    logger = logging.getLogger("pokepic")
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
