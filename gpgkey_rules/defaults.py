"""Constants and default configuration for gpgkey-rules."""

from typing import Any

DEFAULT_CONFIG_FILENAME = "gpgkey-rules.yaml"
DEFAULT_LOG_LEVEL = "WARNING"

ENV_CONFIG = "GPGKEY_RULES_CONFIG"
ENV_CATALOG = "GPGKEY_RULES_CATALOG"

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_default_rules_config() -> dict[str, Any]:
    """Get default rules configuration dictionary."""
    return {
        "rules": {
            "catalog": None,
            "log_level": DEFAULT_LOG_LEVEL,
        }
    }
