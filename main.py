#!/usr/bin/env python3

from bindkit import Bindings


def yell() -> str:
    return "yell"


def scream() -> str:
    return "scream"


# Default keycodes and their actions
KEYCODES = [
    ("X", yell),
    ("Y", scream),
]


def main():
    bindings: Bindings[str, str] = Bindings.from_pairs(KEYCODES)
    print(bindings.run_action("X"))
    bindings.bind_action("X", scream)
    print(bindings.run_action("X"))


if __name__ == "__main__":
    main()
