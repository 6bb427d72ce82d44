from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .settings import Settings


@dataclass(frozen=True)
class LoadedSettings:
    settings: Settings
    config_path: Path | None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)  # type: ignore[arg-type]
        else:
            out[k] = v
    return out


def _detect_default_config_path(search_root: Path) -> Path | None:
    for candidate in (search_root / "nospam.yaml", search_root / "config" / "nospam.yaml"):
        if candidate.is_file():
            return candidate
    return None


def load_settings(
    *,
    config_path: Path | None = None,
    search_root: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> LoadedSettings:
    """Load YAML settings, apply ``overrides`` on top and validate.

    Without an explicit ``config_path``, ``nospam.yaml`` and then
    ``config/nospam.yaml`` are probed under ``search_root`` (default: cwd).
    """

    resolved_path = config_path or _detect_default_config_path(search_root or Path.cwd())

    yaml_data: dict[str, Any] = {}
    if resolved_path is not None and resolved_path.exists():
        raw = yaml.safe_load(resolved_path.read_text(encoding="utf-8"))
        if isinstance(raw, dict):
            yaml_data = raw

    merged = _deep_merge(yaml_data, overrides or {})
    settings = Settings.model_validate(merged)
    return LoadedSettings(settings=settings, config_path=resolved_path)
