from pathlib import Path

import pytest

from receiptsplit.runtime.settings import DEFAULT_OCR_URL, Settings, load_settings


def _write_config(path: Path) -> Path:
    path.write_text(
        """
[parser]
seed_placeholders = false
extra_noise_keywords = ["Happy Hour", "  ", "corkage"]

[ocr]
url = "http://ocr.internal:9000"
timeout = 15

[display]
currency_symbol = "$"
""",
        encoding="utf-8",
    )
    return path


def test_defaults_without_config_file() -> None:
    settings = load_settings()

    assert settings == Settings()
    assert settings.ocr_url == DEFAULT_OCR_URL
    assert settings.seed_placeholders is True
    assert settings.source is None


def test_explicit_config_file(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "custom.toml")

    settings = load_settings(str(path))

    assert settings.seed_placeholders is False
    assert settings.extra_noise_keywords == ("happy hour", "corkage")
    assert settings.ocr_url == "http://ocr.internal:9000"
    assert settings.ocr_timeout == 15.0
    assert settings.currency_symbol == "$"
    assert settings.source == path


def test_config_file_in_working_directory(tmp_path: Path) -> None:
    _write_config(tmp_path / "receiptsplit.toml")
    assert load_settings().currency_symbol == "$"


def test_config_path_from_environment(tmp_path: Path, monkeypatch) -> None:
    path = _write_config(tmp_path / "from-env.toml")
    monkeypatch.setenv("RECEIPTSPLIT_CONFIG", str(path))

    assert load_settings().source == path


def test_missing_explicit_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(str(tmp_path / "missing.toml"))


def test_missing_environment_file_raises(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("RECEIPTSPLIT_CONFIG", str(tmp_path / "missing.toml"))
    with pytest.raises(FileNotFoundError):
        load_settings()


def test_ocr_url_environment_override(tmp_path: Path, monkeypatch) -> None:
    path = _write_config(tmp_path / "custom.toml")
    monkeypatch.setenv("RECEIPTSPLIT_OCR_URL", "http://override:1234")

    assert load_settings(str(path)).ocr_url == "http://override:1234"


def test_settings_are_cached(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "custom.toml")
    assert load_settings(str(path)) is load_settings(str(path))
