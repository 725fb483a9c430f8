"""
Shared sample actions and data for the bindkit test suite.

Tests import these from here rather than from conftest, which pytest loads
under its own module name.
"""

import os

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def yell() -> str:
    return "yell"


def scream() -> str:
    return "scream"


SAMPLE_CONFIG = """
config:
  active_scheme: default
contexts:
  global:
    name: Global
    description: Bindings active everywhere
    mappings:
      "x": yell
      "Y": scream
  menu:
    mappings:
      "X": select
schemes:
  swapped:
    overrides:
      global:
        "X": scream
        "Y": yell
"""
