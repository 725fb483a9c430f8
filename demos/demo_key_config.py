#!/usr/bin/env python3
"""
Demo of YAML-configured bindings dispatched through a context stack.

Usage:
    python demos/demo_key_config.py [path/to/key_mappings.yaml] [scheme]
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from bindkit import ActionDispatcher, ConstantCommand, KeyConfigLoader, LogManager, LogLevel


def yell() -> str:
    return "yell"


def scream() -> str:
    return "scream"


def quit_demo() -> str:
    raise SystemExit("quit requested")


ACTIONS = {
    "yell": yell,
    "scream": scream,
    "help": ConstantCommand("X: yell, Y: scream, Q: quit"),
    "select": ConstantCommand("selected"),
    "close_menu": ConstantCommand("menu closed"),
    "quit": quit_demo,
}


def main():
    config_path = sys.argv[1] if len(sys.argv) > 1 else None
    scheme = sys.argv[2] if len(sys.argv) > 2 else None

    log_manager = LogManager(default_level=LogLevel.DEBUG)
    loader = KeyConfigLoader(config_path, actions=ACTIONS, log_manager=log_manager,
                             fallback={"global": {"X": "yell", "Y": "scream"}})
    loader.load_config()
    if scheme and not loader.set_active_scheme(scheme):
        print(f"Unknown scheme '{scheme}', available: {', '.join(loader.get_available_schemes())}")

    contexts = loader.build_context_manager()
    dispatcher = ActionDispatcher(contexts, log_manager)

    for event in ["X", "Y", "?", "Z"]:
        result = dispatcher.dispatch(event)
        print(f"{event}: {result.value if result.handled else '(unbound)'}")

    contexts.push_context("menu")
    print(f"X in menu: {dispatcher.dispatch('X').value}")
    contexts.pop_context()

    print("\nLog:")
    for message in log_manager.get_messages():
        print(f"  {message.format()}")


if __name__ == "__main__":
    main()
