"""Configuration operations for gpgkey-rules."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from gpgkey_rules import i18n
from gpgkey_rules.defaults import get_default_rules_config
from gpgkey_rules.models import RulesConfig
from gpgkey_rules.result import Failure, Result, Success

logger = logging.getLogger(__name__)

yaml = YAML()
yaml.preserve_quotes = True
yaml.indent(mapping=2, sequence=4, offset=2)


def load(config_path: Path | None) -> Result[RulesConfig, str]:
    """Load the rules configuration.

    A missing path or file yields the default configuration.

    Args:
    ----
        config_path: Path to the YAML configuration file

    Returns:
    -------
        Result with RulesConfig object or error message

    """
    if config_path is None or not config_path.exists():
        return Success(RulesConfig.model_validate(get_default_rules_config()["rules"]))

    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.load(f) or {}
    except (OSError, UnicodeDecodeError, YAMLError) as e:
        return Failure(f"Error reading configuration {config_path}: {e!s}")

    if not isinstance(data, dict):
        return Failure(f"Invalid configuration {config_path}: expected a mapping")

    validation = _validate(data.get("rules") or {})
    if isinstance(validation, Failure):
        return Failure(f"Invalid configuration {config_path}:\n" + "\n".join(validation.error))

    logger.debug(f"Loaded configuration from {config_path}")
    return Success(validation.value.resolve_catalog(config_path.parent))


def apply(rules_config: RulesConfig) -> Result[i18n.Translator, str]:
    """Install the translator described by the configuration.

    Returns
    -------
        Result with the installed translator or error message

    """
    if rules_config.catalog is None:
        i18n.set_translator(None)
        return Success(i18n.identity)

    catalog_result = i18n.load_catalog(rules_config.catalog)
    if isinstance(catalog_result, Failure):
        return catalog_result

    i18n.set_translator(catalog_result.value)
    return Success(catalog_result.value)


def write_default(config_path: Path, force: bool = False) -> Result[Path, str]:
    """Write the default configuration file.

    Args:
    ----
        config_path: Destination path
        force: If True, overwrite an existing file

    Returns:
    -------
        Result with the written path or error message

    """
    if config_path.exists() and not force:
        return Failure(f"Configuration already exists at {config_path}")

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        _write_config_file(get_default_rules_config(), config_path)
    except OSError as e:
        return Failure(f"Failed to write configuration: {e!s}")

    logger.info(f"Created configuration at {config_path}")
    return Success(config_path)


def _validate(data: dict[str, Any]) -> Result[RulesConfig, list[str]]:
    """Validate the rules section using the Pydantic model."""
    try:
        return Success(RulesConfig.model_validate(data))
    except ValidationError as e:
        return Failure([f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in json.loads(e.json())])


def _write_config_file(config_data: dict[str, Any], path: Path) -> None:
    """Write configuration dictionary to a YAML file with a header."""
    with path.open("w", encoding="utf-8") as f:
        f.write("# gpgkey-rules: validation rule configuration\n\n")
        yaml.dump(config_data, f)
