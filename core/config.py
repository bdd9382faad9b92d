"""Configuration loading for lint runs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger("se.config")

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": {"level": "WARNING"},
    "lint": {"include": "*.py"},
}


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping; a missing file is an empty mapping.

    Unparseable YAML and non-mapping documents both raise ``ValueError``
    naming the file.
    """
    if not path.exists():
        logger.debug("Config file %s not found; using empty mapping", path)
        return {}
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_sections(defaults: dict[str, Any], override: dict[str, Any], source: str) -> dict[str, Any]:
    """Overlay ``override`` onto ``defaults`` one section deep.

    A section that is a mapping in ``defaults`` must stay a mapping; keys
    unknown to ``defaults`` pass through untouched.
    """
    merged = {key: dict(value) if isinstance(value, dict) else value for key, value in defaults.items()}
    for key, value in override.items():
        if isinstance(merged.get(key), dict):
            if not isinstance(value, dict):
                raise ValueError(f"Section '{key}' in {source} must be a mapping, got {value!r}.")
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def config_section(config: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a mapping section of ``config``, empty when absent."""
    section = config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got {section!r}.")
    return section


def load_effective_config(config_dir: Path) -> dict[str, Any]:
    """Merge built-in defaults with ``default.yaml`` and ``rules.yaml``."""
    default_path = config_dir / "default.yaml"
    merged = merge_sections(DEFAULT_CONFIG, load_yaml(default_path), str(default_path))
    merged["rules"] = load_yaml(config_dir / "rules.yaml")
    return merged


def configure_logging(config: dict[str, Any]) -> None:
    """Apply the configured level to the ``se`` logger hierarchy."""
    level_name = str(config_section(config, "logging").get("level", "WARNING")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {level_name}")
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("se").setLevel(level)
