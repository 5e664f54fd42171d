"""
Shared pytest fixtures for GammaLUT tests.
"""

import pytest

from gammalut.core.config import GammaTableConfig


def make_config(**overrides):
    """GammaTableConfig for a 256-entry u8 encoding table, with overrides."""
    fields = {
        "name": "GAMMA_TABLE",
        "entry_type_width": 8,
        "gamma": 2.2,
        "size": 256,
    }
    fields.update(overrides)
    return GammaTableConfig(**fields)


@pytest.fixture
def config_factory():
    """Factory building configs from keyword overrides."""
    return make_config


@pytest.fixture
def encoding_config():
    """Scenario 1: size=256, gamma=2.2, max_value=255, encoding."""
    return make_config(max_value=255)


@pytest.fixture
def decoding_config():
    """Scenario 2: same as ``encoding_config`` with decoding."""
    return make_config(max_value=255, decoding=True)


@pytest.fixture
def quantized_config():
    """Scenario 3: size=256, steps=8, gamma=2.2, max_value=255."""
    return make_config(max_value=255, steps=8)


