"""
End-to-end scenarios for the binding registry and the layers built on it.
"""
import os
import subprocess
import sys

from bindkit import ActionDispatcher, Bindings, ConstantCommand, EventView, KeyConfigLoader
from tests.helpers import project_root, yell, scream


class TestRegistryScenarios:
    """Scenarios exercising the registry on its own."""

    def test_rebind_after_run(self):
        """Run X, rebind X to scream, run X again."""
        bindings = Bindings.from_pairs([("X", yell), ("Y", scream)])

        assert bindings.run_action("X") == "yell"
        bindings.bind_action("X", scream)
        assert bindings.run_action("X") == "scream"

    def test_unbound_event(self):
        """Looking up an event that was never bound."""
        bindings = Bindings.from_pairs([("a", ConstantCommand(1))])

        assert bindings.get_action("b") is None
        assert bindings.run_action("b") is None

    def test_transfer_handle(self):
        """Binding a looked-up handle to a new event."""
        bindings = Bindings.from_pairs([("a", ConstantCommand(1))])

        handle = bindings.get_action("a")
        bindings.bind_action("b", handle)

        assert bindings.run_action("b") == bindings.run_action("a") == 1

    def test_rebind_through_views(self):
        """Rebinding by owned key and running through a borrowed view."""
        bindings = Bindings.from_pairs([("X", yell), ("Y", scream)])

        bindings.bind_action("X", bindings.get_action(EventView("Y")))

        assert bindings.run_action(EventView("keyX", 3)) == "scream"


class TestConfiguredDispatch:
    """Scenarios going from YAML to dispatched results."""

    def test_config_to_dispatch(self, loaded_loader, log_manager):
        """Load a config, dispatch, switch scheme, dispatch again."""
        dispatcher = ActionDispatcher(loaded_loader.build_bindings(), log_manager)
        assert dispatcher.dispatch("X").value == "yell"

        loaded_loader.set_active_scheme("swapped")
        dispatcher.resolver = loaded_loader.build_bindings()
        assert dispatcher.dispatch("X").value == "scream"

    def test_bundled_config(self):
        """The bundled key mapping file builds working contexts."""
        actions = {name: ConstantCommand(name) for name in
                   ("yell", "scream", "quit", "help", "select", "close_menu")}
        loader = KeyConfigLoader(actions=actions)

        assert loader.load_config()
        assert loader.validate_config()["valid"]

        contexts = loader.build_context_manager()
        assert contexts.run_action("?") == "help"
        contexts.push_context("menu")
        assert contexts.run_action("ESCAPE") == "close_menu"
        assert contexts.run_action("X") == "select"


class TestDemoPrograms:
    """Run the demo entry points as scripts."""

    def _run(self, *args):
        env = dict(os.environ, PYTHONPATH=project_root)
        return subprocess.run([sys.executable, *args], cwd=project_root, env=env,
                              capture_output=True, text=True, check=True)

    def test_main(self):
        """main.py prints the result before and after rebinding."""
        result = self._run("main.py")

        assert result.stdout.splitlines() == ["yell", "scream"]

    def test_agitate(self):
        """demos/agitate.py rebinds X to Y's action."""
        result = self._run(os.path.join("demos", "agitate.py"))

        assert result.stdout.splitlines() == ["yell", "scream"]

    def test_demo_key_config_swapped(self):
        """demos/demo_key_config.py honors the scheme argument."""
        result = self._run(os.path.join("demos", "demo_key_config.py"),
                           os.path.join("assets", "config", "key_mappings.yaml"), "swapped")

        lines = result.stdout.splitlines()
        assert lines[0] == "X: scream"
        assert lines[1] == "Y: yell"
        assert "Z: (unbound)" in lines
        assert "X in menu: selected" in lines
