#!/usr/bin/env python3
"""
A small demo exercising the registry: rebinding a key to the action that is
already bound to another, and looking keys up through borrowed views.
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from bindkit import Bindings, EventView


def yell() -> str:
    return "yell"


def scream() -> str:
    return "scream"


KEYCODES = [
    ("X", yell),
    ("Y", scream),
]


def main():
    bindings: Bindings[str, str] = Bindings.from_pairs(KEYCODES)
    print(bindings.run_action("X"))

    y_action = bindings.get_action("Y")
    bindings.bind_action("X", y_action)

    # Look "X" up through a view into a longer buffer
    line = "press X to continue"
    print(bindings.run_action(EventView(line, 6, 7)))


if __name__ == "__main__":
    main()
