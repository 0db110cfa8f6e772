"""Configuration loading for xmlclasscheck (.xmlclasscheck.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".xmlclasscheck.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration is missing, invalid, or cannot be parsed."""


@dataclass
class PluginConfig:
    """Settings consumed by the XML class reference check."""

    root: Path
    # Hosts may hand over the raw option string; "" means unset.
    xml_dir: Optional[Path | str] = None
    project_root: Optional[Path] = None
    symbols: Optional[Path] = None
    report_parse_errors: bool = False


def load_config(config_path: Path) -> PluginConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return PluginConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    return PluginConfig(
        root=root,
        xml_dir=_as_path(root, data.get("xml_dir")),
        project_root=_as_path(root, data.get("project_root")),
        symbols=_as_path(root, data.get("symbols")),
        report_parse_errors=_as_bool(data.get("report_parse_errors")) or False,
    )


def require_xml_dir(config: PluginConfig) -> Path:
    """Return the configured XML directory or raise `ConfigError`."""
    raw = config.xml_dir
    if raw is None or not str(raw).strip():
        raise ConfigError(
            "missing config 'xml_dir', expected a path to a directory containing XML files"
        )
    xml_dir = Path(raw)
    if not xml_dir.is_dir():
        raise ConfigError(f"expected config 'xml_dir' to be a directory, got '{xml_dir}'")
    return xml_dir


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_path(root: Path, value: Any) -> Optional[Path]:
    text = _as_str(value)
    if not text:
        return None
    path = Path(text).expanduser()
    return path if path.is_absolute() else root / path


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None
