"""Centralized application configuration."""

import logging
import tomllib
from pathlib import Path
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mb_navformat.coords import CoordinateStyle
from mb_navformat.locale_service import parse_locale

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "mb-navformat" / "config.toml"


class Config(BaseModel):
    """Application-wide configuration."""

    model_config = ConfigDict(frozen=True)

    display_locale: str | None = Field(default=None, description="Locale for rendering (e.g. 'de_DE'). Default: system locale")
    coordinate_style: CoordinateStyle = Field(default=CoordinateStyle.DEG_MIN, description="Canonical coordinate rendering")
    translations_dir: Path | None = Field(default=None, description="Directory with compiled gettext catalogs")

    @field_validator("display_locale")
    @classmethod
    def _check_locale(cls, value: str | None) -> str | None:
        """Reject locale identifiers unknown to CLDR."""
        if value is not None:
            parse_locale(value)
        return value

    @classmethod
    def build(cls, config_path: Path | None = None, **overrides: Any) -> Self:
        """Build a Config instance from defaults, an optional config.toml, and explicit overrides.

        Invalid values in the file are skipped with a warning. Invalid overrides raise ValidationError.
        """
        resolved_path = config_path if config_path is not None else DEFAULT_CONFIG_PATH

        kwargs: dict[str, Any] = {}
        if resolved_path.is_file():
            with resolved_path.open("rb") as f:
                toml_data = tomllib.load(f)
            section = toml_data.get("format", {})
            if isinstance(section, dict):
                for name in cls.model_fields:
                    if name not in section:
                        continue
                    try:
                        cls.model_validate({name: section[name]})
                    except ValidationError:
                        logger.warning("Ignoring invalid %s=%r in %s", name, section[name], resolved_path)
                        continue
                    kwargs[name] = section[name]

        kwargs.update({name: value for name, value in overrides.items() if value is not None})
        return cls(**kwargs)
