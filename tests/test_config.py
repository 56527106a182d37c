"""Tests for loading and applying the configuration."""

from pathlib import Path

from gpgkey_rules import i18n
from gpgkey_rules.config import apply, load, write_default
from gpgkey_rules.models import RulesConfig
from gpgkey_rules.result import Failure, Success
from gpgkey_rules.types import LogLevel
from tests.conftest import TYPE_MESSAGE, TYPE_MESSAGE_FR
from tests.helpers import write_yaml


def test_load_defaults_without_file(tmp_path: Path) -> None:
    """Test that a missing configuration file yields the defaults."""
    for path in [None, tmp_path / "missing.yaml"]:
        result = load(path)
        assert isinstance(result, Success)
        assert result.value.catalog is None
        assert result.value.log_level == LogLevel.WARNING


def test_load_resolves_relative_catalog(tmp_path: Path) -> None:
    """Test that a relative catalog path is anchored at the config directory."""
    config_path = write_yaml(tmp_path / "rules.yaml", {"rules": {"catalog": "fr.yaml", "log_level": "debug"}})

    result = load(config_path)
    assert isinstance(result, Success)
    assert result.value.catalog == tmp_path / "fr.yaml"
    assert result.value.log_level == LogLevel.DEBUG


def test_load_keeps_absolute_catalog(tmp_path: Path) -> None:
    """Test that an absolute catalog path is kept as is."""
    catalog = tmp_path / "elsewhere" / "fr.yaml"
    config_path = write_yaml(tmp_path / "rules.yaml", {"rules": {"catalog": str(catalog)}})

    result = load(config_path)
    assert isinstance(result, Success)
    assert result.value.catalog == catalog


def test_load_invalid(tmp_path: Path) -> None:
    """Test that invalid settings are reported with their location."""
    config_path = write_yaml(tmp_path / "rules.yaml", {"rules": {"log_level": "LOUD", "colour": True}})

    result = load(config_path)
    assert isinstance(result, Failure)
    assert "log_level" in result.error
    assert "colour" in result.error


def test_load_not_a_mapping(tmp_path: Path) -> None:
    """Test that a YAML list is rejected."""
    config_path = tmp_path / "rules.yaml"
    config_path.write_text("- rules\n", encoding="utf-8")

    result = load(config_path)
    assert isinstance(result, Failure)
    assert "expected a mapping" in result.error


def test_apply_catalog(catalog_path: Path) -> None:
    """Test that applying a configuration installs its catalog."""
    result = apply(RulesConfig(catalog=catalog_path))
    assert isinstance(result, Success)
    assert i18n.translate(TYPE_MESSAGE) == TYPE_MESSAGE_FR

    result = apply(RulesConfig())
    assert isinstance(result, Success)
    assert i18n.translate(TYPE_MESSAGE) == TYPE_MESSAGE


def test_apply_missing_catalog(tmp_path: Path) -> None:
    """Test that a missing catalog is reported and nothing is installed."""
    result = apply(RulesConfig(catalog=tmp_path / "missing.yaml"))
    assert isinstance(result, Failure)
    assert i18n.get_translator() is i18n.identity


def test_write_default(tmp_path: Path) -> None:
    """Test writing and reading back the default configuration."""
    config_path = tmp_path / "conf" / "gpgkey-rules.yaml"

    result = write_default(config_path)
    assert isinstance(result, Success)
    assert config_path.read_text(encoding="utf-8").startswith("# gpgkey-rules")

    loaded = load(config_path)
    assert isinstance(loaded, Success)
    assert loaded.value == RulesConfig()

    assert isinstance(write_default(config_path), Failure)
    assert isinstance(write_default(config_path, force=True), Success)


def test_load_not_utf8(tmp_path: Path) -> None:
    """Test that a configuration with undecodable bytes is reported, not raised."""
    config_path = tmp_path / "rules.yaml"
    config_path.write_bytes(b"rules:\n  log_level: \xff\n")

    result = load(config_path)
    assert isinstance(result, Failure)
    assert result.error.startswith("Error reading configuration")
