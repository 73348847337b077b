"""Configuration loading for autocomponent (.autocomponent.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".autocomponent.yml"
DEFAULT_DIRECTIVE = "AutoComponent"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class DiagnosticsConfig:
    """How the host treats diagnostics accumulated during a run."""

    fail_on_error: bool = False
    warn_unscoped: bool = False


@dataclass
class LoggingConfig:
    """Console verbosity and optional log file for a host run."""

    verbose: bool = False
    log_file: Optional[Path] = None


@dataclass
class AutoComponentConfig:
    """Represents the settings defined in .autocomponent.yml."""

    root: Path
    directive: str = DEFAULT_DIRECTIVE
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Path) -> AutoComponentConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return AutoComponentConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    diagnostics = DiagnosticsConfig()
    diagnostics_data = _as_dict(data.get("diagnostics"))
    if diagnostics_data:
        fail_on_error = _as_bool(diagnostics_data.get("fail_on_error"))
        warn_unscoped = _as_bool(diagnostics_data.get("warn_unscoped"))
        if fail_on_error is not None:
            diagnostics.fail_on_error = fail_on_error
        if warn_unscoped is not None:
            diagnostics.warn_unscoped = warn_unscoped

    logging_config = LoggingConfig()
    logging_data = _as_dict(data.get("logging"))
    if logging_data:
        logging_config.verbose = _as_bool(logging_data.get("verbose")) or False
        log_file = _as_str(logging_data.get("log_file"))
        logging_config.log_file = root / log_file if log_file else None

    return AutoComponentConfig(
        root=root,
        directive=_as_str(data.get("directive")) or DEFAULT_DIRECTIVE,
        diagnostics=diagnostics,
        logging=logging_config,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
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


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value.strip() or None
    return None


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


__all__ = [
    "AutoComponentConfig",
    "ConfigError",
    "DiagnosticsConfig",
    "LoggingConfig",
    "load_config",
]
