"""
Basic test fixtures for the bindkit test suite.

Provides sample actions, registries and loaders shared across tests.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from bindkit.core import Bindings
from bindkit.input_system import KeyConfigLoader
from bindkit.log_manager import LogManager, LogLevel
from tests.helpers import SAMPLE_CONFIG, yell, scream


@pytest.fixture
def sample_actions():
    """Action table used to resolve names from key configs."""
    return {
        "yell": yell,
        "scream": scream,
        "select": lambda: "select",
    }


@pytest.fixture
def keycode_bindings():
    """Registry seeded with X -> yell and Y -> scream."""
    return Bindings.from_pairs([("X", yell), ("Y", scream)])


@pytest.fixture
def log_manager():
    """Log manager that keeps debug messages visible."""
    return LogManager(default_level=LogLevel.DEBUG)


@pytest.fixture
def config_file(tmp_path):
    """Write the sample key config to a temporary file."""
    path = tmp_path / "key_mappings.yaml"
    path.write_text(SAMPLE_CONFIG, encoding="utf-8")
    return path


@pytest.fixture
def loaded_loader(config_file, sample_actions, log_manager):
    """Key config loader with the sample config already loaded."""
    loader = KeyConfigLoader(str(config_file), actions=sample_actions, log_manager=log_manager)
    assert loader.load_config()
    return loader
