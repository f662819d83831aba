"""
Configuration loader for the slay engine.

This module handles loading and parsing of the YAML configuration file that
says where the slay catalog and ego-item templates live, how random slay
picks are seeded and how verbose logging is.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml


DEFAULT_CONFIG_PATH = "assets/config/slays.yaml"


@dataclass
class SlayConfig:
    """Resolved engine configuration."""
    catalog_file: Optional[str] = "assets/data/slays.yaml"
    ego_items_file: Optional[str] = "assets/data/ego_items.yaml"
    rng_seed: Optional[int] = None
    debug_logging: bool = False
    max_log_messages: int = 1000


class ConfigLoader:
    """Loads the engine configuration from a YAML file."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self._config: dict[str, Any] = {}
        self.config = SlayConfig()

    @staticmethod
    def project_root() -> Path:
        return Path(__file__).parent.parent.parent.parent

    def resolve_path(self, path: str) -> Path:
        """Resolve a path from the config; relative paths are taken from the project root."""
        if os.path.isabs(path):
            return Path(path)
        return self.project_root() / path

    def load_config(self) -> bool:
        """
        Load configuration from the YAML file.

        Returns:
            bool: True if config was loaded successfully; on False the
            built-in defaults are in effect
        """
        config_file = self.resolve_path(self.config_path)
        if not config_file.exists():
            print(f"Warning: Slay config file not found: {config_file}")
            self._load_fallback_config()
            return False

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}
            self.config = self._parse_config(self._config)
        except (OSError, yaml.YAMLError, TypeError, ValueError) as e:
            print(f"Error loading slay config: {e}")
            self._load_fallback_config()
            return False

        return True

    def _parse_config(self, data: dict[str, Any]) -> SlayConfig:
        defaults = SlayConfig()
        logging_section = data.get('logging') or {}

        rng_seed = data.get('rng_seed', defaults.rng_seed)
        return SlayConfig(
            catalog_file=data.get('catalog_file', defaults.catalog_file),
            ego_items_file=data.get('ego_items_file', defaults.ego_items_file),
            rng_seed=int(rng_seed) if rng_seed is not None else None,
            debug_logging=bool(logging_section.get('debug', defaults.debug_logging)),
            max_log_messages=int(logging_section.get('max_messages', defaults.max_log_messages)),
        )

    def _load_fallback_config(self) -> None:
        self._config = {}
        self.config = SlayConfig()

    def catalog_path(self) -> Optional[Path]:
        """Resolved catalog path, or None if no catalog file is configured."""
        if not self.config.catalog_file:
            return None
        return self.resolve_path(self.config.catalog_file)

    def ego_items_path(self) -> Optional[Path]:
        """Resolved ego-item template path, or None if none is configured."""
        if not self.config.ego_items_file:
            return None
        return self.resolve_path(self.config.ego_items_file)
