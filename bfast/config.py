"""Configuration loading for bfast (.bfast.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".bfast.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ApiConfig:
    """Submission API settings."""

    base_url: Optional[str] = None
    request_timeout: Optional[float] = None


@dataclass
class SubmissionConfig:
    """Defaults applied to submissions when no flag overrides them."""

    hidden: bool = False
    blurb: Optional[str] = None


@dataclass
class BfastConfig:
    """Represents the settings defined in .bfast.yml."""

    root: Path
    api: ApiConfig = field(default_factory=ApiConfig)
    readme_path: Optional[str] = None
    submission: SubmissionConfig = field(default_factory=SubmissionConfig)


def load_config(config_path: Path) -> BfastConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return BfastConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    api_data = _as_dict(data.get("api"))
    api = ApiConfig(
        base_url=_as_str(api_data.get("base_url")),
        request_timeout=_as_float(api_data.get("request_timeout")),
    )

    readme_data = _as_dict(data.get("readme"))
    readme_path = _as_str(readme_data.get("path"))

    submission_data = _as_dict(data.get("submission"))
    submission = SubmissionConfig(
        hidden=_as_bool(submission_data.get("hidden")) or False,
        blurb=_as_str(submission_data.get("blurb")),
    )

    return BfastConfig(root=root, api=api, readme_path=readme_path, submission=submission)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (str, int, float)):
        text = str(value).strip()
        return text or None
    return None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
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


__all__ = ["ApiConfig", "BfastConfig", "CONFIG_FILENAME", "ConfigError", "SubmissionConfig", "load_config"]
