# SPDX-License-Identifier: MIT
"""
Scanner configuration loader for aicodesafe.
"""
from __future__ import annotations

import copy
import os
import logging
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from aicodesafe.core.exceptions import AICodeSafeConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "AICODESAFE_CONFIG"
CONFIG_NAMES = (".aicodesafe.yml", ".aicodesafe.yaml")

DEFAULT_CONFIG: Dict[str, Any] = {
    "max_bytes": 1024 * 1024,
    "interesting_tools": ["Read", "MultiRead"],
    "disabled_detectors": [],
    "custom_rules": [],
    "entropy": {"enabled": True, "threshold": 3.8, "min_length": 20},
    "report": {"max_findings_per_file": 10},
}


def load_scanner_config(config_path: Optional[str] = None, repo_root: str = ".") -> Dict[str, Any]:
    """
    Load scanner configuration following the search order.

    Args:
        config_path: Explicit config path from --config CLI flag
        repo_root: Directory searched for .aicodesafe.yml/.aicodesafe.yaml

    Returns:
        Dictionary containing scanner configuration

    Raises:
        AICodeSafeConfigError: If config file is malformed or explicitly provided config is missing
    """
    # 1. CLI --config, then the environment variable
    explicit = config_path or os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        config_abs_path = Path(explicit).expanduser().resolve()
        if not config_abs_path.is_file():
            raise AICodeSafeConfigError(
                f"Specified config file not found: {config_abs_path}",
                config_path=str(config_abs_path),
            )
        config = _load_yaml_config(config_abs_path)
        logger.info("Loaded config: %s", config_abs_path)
        return config

    # 2. .aicodesafe.yml or .aicodesafe.yaml in the root
    repo_path = Path(repo_root).resolve()
    for config_name in CONFIG_NAMES:
        config_file = repo_path / config_name
        if config_file.is_file():
            config = _load_yaml_config(config_file)
            logger.info("Loaded config: %s", config_file)
            return config

    # 3. Built-in defaults
    logger.debug("Using default scanner config")
    return get_default_scanner_config()


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """Load and validate YAML config file."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise AICodeSafeConfigError(
            f"Failed to parse config file: {e}", config_path=str(config_path)
        ) from e

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise AICodeSafeConfigError("Config must be a mapping", config_path=str(config_path))

    try:
        return _apply_scanner_defaults(config)
    except AICodeSafeConfigError as e:
        e.config_path = str(config_path)
        raise


def _apply_scanner_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Fill missing keys with defaults and check value types."""
    merged = get_default_scanner_config()
    for key, value in config.items():
        if key not in merged:
            logger.warning("Ignoring unknown config key: %s", key)
            continue
        default = merged[key]
        if isinstance(default, dict):
            if not isinstance(value, dict):
                raise AICodeSafeConfigError("Expected a mapping", section=key)
            default.update(value)
        elif isinstance(default, list):
            if not isinstance(value, list):
                raise AICodeSafeConfigError("Expected a list", section=key)
            merged[key] = value
        else:
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise AICodeSafeConfigError("Expected a positive integer", section=key)
            merged[key] = value

    entropy = merged["entropy"]
    try:
        entropy["threshold"] = float(entropy["threshold"])
        entropy["min_length"] = int(entropy["min_length"])
    except (TypeError, ValueError):
        raise AICodeSafeConfigError("threshold and min_length must be numbers", section="entropy") from None
    if entropy["min_length"] < 1:
        raise AICodeSafeConfigError("min_length must be at least 1", section="entropy")
    if not isinstance(entropy["enabled"], bool):
        raise AICodeSafeConfigError("enabled must be true or false", section="entropy")

    limit = merged["report"]["max_findings_per_file"]
    if not isinstance(limit, int) or isinstance(limit, bool) or limit <= 0:
        raise AICodeSafeConfigError("max_findings_per_file must be a positive integer", section="report")

    return merged


def get_default_scanner_config() -> Dict[str, Any]:
    """
    Get the default scanner configuration.

    Returns:
        Dictionary with default scanner settings
    """
    return copy.deepcopy(DEFAULT_CONFIG)


def create_default_config_template() -> str:
    """
    Create a minimal .aicodesafe.yml template with commented examples.

    Returns:
        YAML string with default configuration template
    """
    return """# aicodesafe configuration
# Place this file as .aicodesafe.yml in the directory hooks run from,
# or point AICODESAFE_CONFIG / --config at it.

# Byte cap for each file sampled by the pre-tool-use hook
max_bytes: 1048576

# Tool names whose file arguments the pre-tool-use hook inspects
interesting_tools:
  - Read
  - MultiRead

# Detectors to disable by name
disabled_detectors: []
  # Examples:
  # - "Phone"
  # - "High-Entropy Token"

# Extra regex rules appended after the built-in ones
custom_rules: []
  # - name: "Internal Service Token"
  #   severity: high
  #   pattern: "\\\\bist_[A-Za-z0-9]{32}\\\\b"
  #   ignore_case: false

# Entropy heuristic for unknown secret formats
entropy:
  enabled: true
  threshold: 3.8
  min_length: 20

# Hook summary output
report:
  max_findings_per_file: 10
"""
