from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from nospam.config.loader import load_settings
from nospam.config.settings import Settings


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_without_config_file(tmp_path):
    loaded = load_settings(search_root=tmp_path)

    assert loaded.config_path is None
    assert loaded.settings.logging.level == "INFO"
    assert loaded.settings.logging.json_logs is True
    assert loaded.settings.throttle.bypass is False
    assert loaded.settings.limiters == {}


def test_yaml_is_loaded_and_overrides_win(tmp_path):
    path = _write(
        tmp_path / "nospam.yaml",
        """
logging:
  level: DEBUG
  json: false
limiters:
  render_errors: {window: second, limit: 5}
  chat: {window: Minute, limit: 10}
""",
    )

    loaded = load_settings(
        search_root=tmp_path,
        overrides={"limiters": {"chat": {"limit": 3}}, "throttle": {"bypass": True}},
    )

    assert loaded.config_path == path
    s = loaded.settings
    assert s.logging.level == "DEBUG"
    assert s.logging.json_logs is False
    assert s.throttle.bypass is True
    assert s.limiters["render_errors"].limit == 5
    assert s.limiters["chat"].window == "minute"
    assert s.limiters["chat"].limit == 3


def test_config_subdirectory_is_probed(tmp_path):
    path = _write(tmp_path / "config" / "nospam.yaml", "throttle:\n  bypass: true\n")

    loaded = load_settings(search_root=tmp_path)

    assert loaded.config_path == path
    assert loaded.settings.throttle.bypass is True


def test_explicit_path_and_non_mapping_document(tmp_path):
    path = _write(tmp_path / "custom.yaml", "- just\n- a list\n")

    loaded = load_settings(config_path=path)

    assert loaded.config_path == path
    assert loaded.settings == Settings()


@pytest.mark.parametrize(
    "limiter",
    [{"window": "second", "limit": 0}, {"window": "week", "limit": 1}, {"window": "second"}],
)
def test_invalid_limiter_settings_are_rejected(limiter):
    with pytest.raises(ValidationError):
        Settings.model_validate({"limiters": {"x": limiter}})


def test_blank_limiter_name_is_rejected():
    with pytest.raises(ValidationError):
        Settings.model_validate({"limiters": {"  ": {"limit": 1}}})
