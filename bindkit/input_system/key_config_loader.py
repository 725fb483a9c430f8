"""
Configuration loader for key mappings.

This module handles loading and parsing of YAML configuration files that map
keys to action names, and builds binding registries from them by resolving
the names against a table of actions.
"""
import os
from pathlib import Path
from collections.abc import Mapping
from typing import Any, Optional

import yaml

from ..core import Action, Bindings
from ..log_manager import LogManager
from .context_manager import BindingContextManager

GLOBAL_CONTEXT = "global"


class KeyConfigLoader:
    """Loads and manages key mapping configurations from YAML files."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        actions: Optional[Mapping[str, Action]] = None,
        log_manager: Optional[LogManager] = None,
        fallback: Optional[Mapping[str, Mapping[str, str]]] = None
    ):
        self.config_path = config_path or "assets/config/key_mappings.yaml"
        self.actions: dict[str, Action] = dict(actions or {})
        self.log_manager = log_manager or LogManager()
        self.fallback = {context: dict(mappings) for context, mappings in (fallback or {}).items()}
        self._config: dict[str, Any] = {}
        self._key_mappings: dict[str, dict[str, str]] = {}
        self._active_scheme: str = "default"

    def _resolve_config_file(self) -> Path:
        if os.path.isabs(self.config_path):
            return Path(self.config_path)
        # Relative paths are relative to the project root
        project_root = Path(__file__).parent.parent.parent
        return project_root / self.config_path

    def load_config(self) -> bool:
        """
        Load configuration from the YAML file.

        Returns:
            bool: True if config was loaded successfully
        """
        config_file = self._resolve_config_file()

        if not config_file.exists():
            self.log_manager.warning(f"Key config file not found: {config_file}")
            self._load_fallback_config()
            return False

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                text = f.read()
        except OSError as e:
            self.log_manager.error(f"Error reading key config: {e}")
            self._load_fallback_config()
            return False

        if not self.load_from_string(text):
            return False

        self.log_manager.config(f"Loaded key config from {config_file.name}")
        return True

    def load_from_string(self, text: str) -> bool:
        """
        Load configuration from a YAML document.

        Args:
            text: The YAML source

        Returns:
            bool: True if config was parsed successfully
        """
        try:
            config = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            self.log_manager.error(f"Error parsing key config: {e}")
            self._load_fallback_config()
            return False

        shape_error = self._check_config_shape(config)
        if shape_error:
            self.log_manager.error(f"Invalid key config: {shape_error}")
            self._load_fallback_config()
            return False

        self._config = self._normalize_contexts(config)
        config_section = self._config.get('config') or {}
        self._active_scheme = str(config_section.get('active_scheme', 'default'))

        self._parse_key_mappings()
        return True

    def _check_config_shape(self, config: Any) -> Optional[str]:
        """
        Check that every section of a parsed config is a mapping.

        Args:
            config: The document as parsed by YAML

        Returns:
            str: Description of the first misshapen section, or None if valid
        """
        def is_section(value: Any) -> bool:
            return value is None or isinstance(value, dict)

        if not isinstance(config, dict):
            return "top level must be a mapping"

        for section in ('config', 'contexts', 'schemes'):
            if not is_section(config.get(section)):
                return f"'{section}' must be a mapping"

        for context_name, context_data in (config.get('contexts') or {}).items():
            if not is_section(context_data):
                return f"context '{context_name}' must be a mapping"
            if not is_section((context_data or {}).get('mappings')):
                return f"mappings of context '{context_name}' must be a mapping"

        for scheme_name, scheme in (config.get('schemes') or {}).items():
            if not is_section(scheme):
                return f"scheme '{scheme_name}' must be a mapping"
            overrides = (scheme or {}).get('overrides')
            if not is_section(overrides):
                return f"overrides of scheme '{scheme_name}' must be a mapping"
            for context_name, mappings in (overrides or {}).items():
                if not is_section(mappings):
                    return f"override of context '{context_name}' in scheme '{scheme_name}' must be a mapping"

        return None

    def _normalize_contexts(self, config: dict[str, Any]) -> dict[str, Any]:
        """Lower-case context names in the contexts and scheme override sections."""
        normalized = dict(config)
        normalized['contexts'] = {
            str(name).lower(): data or {} for name, data in (config.get('contexts') or {}).items()
        }
        schemes = {}
        for scheme_name, scheme in (config.get('schemes') or {}).items():
            scheme = dict(scheme or {})
            scheme['overrides'] = {
                str(name).lower(): mappings or {} for name, mappings in (scheme.get('overrides') or {}).items()
            }
            schemes[scheme_name] = scheme
        normalized['schemes'] = schemes
        return normalized

    def _parse_key_mappings(self) -> None:
        """Parse the key mappings from the loaded config."""
        self._key_mappings.clear()

        contexts_config = self._config.get('contexts') or {}
        schemes_config = self._config.get('schemes') or {}

        if self._active_scheme != 'default' and self._active_scheme not in schemes_config:
            self.log_manager.warning(f"Unknown key scheme '{self._active_scheme}', using defaults")

        for context, context_data in contexts_config.items():
            final_mappings = dict(context_data.get('mappings') or {})
            if self._active_scheme != 'default' and self._active_scheme in schemes_config:
                overrides = schemes_config[self._active_scheme]['overrides'].get(context) or {}
                final_mappings.update(overrides)

            key_mapping = {}
            for key, action_name in final_mappings.items():
                key_str = self._parse_key_string(key)
                if not key_str:
                    self.log_manager.warning(f"Empty key in context '{context}'")
                    continue
                key_mapping[key_str] = str(action_name)

            self._key_mappings[context] = key_mapping

    def _parse_key_string(self, key: Any) -> str:
        """
        Normalize a key from the config file.

        Args:
            key: Key as parsed by YAML (usually a string)

        Returns:
            str: The normalized key, empty if the key is blank
        """
        return str(key).upper().strip()

    def _load_fallback_config(self) -> None:
        """Use the fallback mappings when the config file can't be loaded."""
        # Kept as a config document so scheme changes reparse it
        self._config = self._normalize_contexts({
            'contexts': {context: {'mappings': dict(mappings)} for context, mappings in self.fallback.items()}
        })
        self._active_scheme = "default"
        self._parse_key_mappings()
        self.log_manager.config("Loaded fallback key configuration")

    def reload_config(self) -> bool:
        """
        Reload the configuration from the file.

        Returns:
            bool: True if reload was successful
        """
        return self.load_config()

    def get_key_mappings(self, context: str = GLOBAL_CONTEXT) -> dict[str, str]:
        """
        Get key mappings for a specific context.

        Args:
            context: The context name

        Returns:
            Dict[str, str]: Dictionary mapping keys to action names
        """
        return dict(self._key_mappings.get(context, {}))

    def get_all_key_mappings(self) -> dict[str, dict[str, str]]:
        """Get all key mappings organized by context."""
        return {context: dict(mappings) for context, mappings in self._key_mappings.items()}

    def get_action_name_for_key(self, key: str, context: str = GLOBAL_CONTEXT) -> Optional[str]:
        """
        Get the action name associated with a key in a specific context.

        Returns:
            str: The action name, or None if not mapped
        """
        return self._key_mappings.get(context, {}).get(self._parse_key_string(key))

    def get_available_schemes(self) -> list[str]:
        """Get the names of the available key schemes."""
        schemes = self._config.get('schemes') or {}
        return ['default'] + [name for name in schemes if name != 'default']

    def get_active_scheme(self) -> str:
        """Get the currently active key scheme."""
        return self._active_scheme

    def set_active_scheme(self, scheme_name: str) -> bool:
        """
        Set the active key scheme.

        Args:
            scheme_name: Name of the scheme to activate

        Returns:
            bool: True if scheme was set successfully
        """
        if scheme_name not in self.get_available_schemes():
            return False

        self._active_scheme = scheme_name
        self._parse_key_mappings()
        return True

    def get_context_info(self, context: str) -> dict[str, Any]:
        """
        Get information about a context from the config.

        Returns:
            Dict: Context information (name, description, key count)
        """
        context = context.lower()
        contexts = self._config.get('contexts') or {}
        context_data = contexts.get(context) or {}

        return {
            'name': context_data.get('name', context.replace('_', ' ').title()),
            'description': context_data.get('description', ''),
            'key_count': len(self._key_mappings.get(context, {}))
        }

    def build_bindings(self, context: str = GLOBAL_CONTEXT) -> Bindings:
        """
        Build a registry for one context.

        Action names without an entry in the action table are skipped.

        Args:
            context: The context to build

        Returns:
            Bindings: Registry mapping normalized keys to actions
        """
        pairs = []
        for key, action_name in self._key_mappings.get(context, {}).items():
            action = self.actions.get(action_name)
            if action is None:
                self.log_manager.warning(f"Unknown action '{action_name}' for key '{key}' in context '{context}'")
                continue
            pairs.append((key, action))
        return Bindings.from_pairs(pairs)

    def build_context_manager(self) -> BindingContextManager:
        """
        Build a context manager with one registry per configured context.

        The global context becomes the fallback registry.
        """
        manager = BindingContextManager(self.build_bindings(GLOBAL_CONTEXT))
        for context in self._key_mappings:
            if context != GLOBAL_CONTEXT:
                manager.set_context_bindings(context, self.build_bindings(context))
        return manager

    def validate_config(self) -> dict[str, Any]:
        """
        Validate the loaded configuration.

        Returns:
            Dict: Validation results including errors and warnings
        """
        errors = []
        warnings = []

        contexts = self._config.get('contexts') or {}
        if GLOBAL_CONTEXT not in contexts:
            warnings.append(f"Missing '{GLOBAL_CONTEXT}' context")

        schemes = self._config.get('schemes') or {}
        for scheme_name, scheme in schemes.items():
            for context_name in ((scheme or {}).get('overrides') or {}):
                if context_name not in contexts:
                    warnings.append(f"Scheme '{scheme_name}' overrides unknown context: {context_name}")

        for context, mappings in self._key_mappings.items():
            for key, action_name in mappings.items():
                if action_name not in self.actions:
                    errors.append(f"Unknown action '{action_name}' for key '{key}' in context '{context}'")

        total_mappings = sum(len(mappings) for mappings in self._key_mappings.values())
        if total_mappings == 0:
            errors.append("No valid key mappings found")

        return {
            'valid': len(errors) == 0,
            'errors': errors,
            'warnings': warnings,
            'contexts': len(self._key_mappings),
            'total_mappings': total_mappings,
            'active_scheme': self._active_scheme
        }
