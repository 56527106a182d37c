"""Configuration models for gpgkey-rules."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from gpgkey_rules.defaults import DEFAULT_LOG_LEVEL
from gpgkey_rules.types import LogLevel


class RulesConfig(BaseModel):
    """Settings read from the ``rules`` section of the configuration file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    catalog: Path | None = None
    log_level: LogLevel = LogLevel(DEFAULT_LOG_LEVEL)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls: type["RulesConfig"], v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    def resolve_catalog(self: "RulesConfig", base_dir: Path) -> "RulesConfig":
        """Return a copy with a relative catalog path anchored at base_dir."""
        if self.catalog is None or self.catalog.is_absolute():
            return self
        return self.model_copy(update={"catalog": base_dir / self.catalog})
