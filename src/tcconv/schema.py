# schema.py
from __future__ import annotations

import os
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tcconv.tc_constants import ConstantStuff as CS, MultiSchemeMode


class WindowsTerminalDocument(BaseModel):
    """Envelope of a settings.json style document; only ``schemes`` is read."""
    model_config = ConfigDict(extra="ignore")

    schemes: List[Dict[str, Any]]


class AlacrittyColors(BaseModel):
    model_config = ConfigDict(extra="ignore")

    primary: Dict[str, Any]
    normal: Dict[str, Any]
    bright: Dict[str, Any]


class AlacrittyDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    colors: AlacrittyColors


class ConversionSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    multi_scheme_mode: MultiSchemeMode = MultiSchemeMode.CONCATENATE
    json_indent: int = Field(default=CS.JSON_INDENT_DEFAULT, ge=0)

    @field_validator("multi_scheme_mode", mode="before")
    @classmethod
    def _normalize_mode(cls, v):
        # accept "Fail", " concatenate " etc. from the environment
        if isinstance(v, str):
            return v.strip().lower()
        return v


def load_settings(env: Optional[Mapping[str, str]] = None, **overrides) -> ConversionSettings:
    """Build settings from ``TCCONV_*`` environment variables plus overrides.

    Overrides that are None are ignored so CLI flags left unset do not mask
    the environment. Raises ValueError on an invalid value.
    """
    env = os.environ if env is None else env
    values: Dict[str, Any] = {}
    if env.get(CS.ENV_MULTI_SCHEME):
        values["multi_scheme_mode"] = env[CS.ENV_MULTI_SCHEME]
    if env.get(CS.ENV_JSON_INDENT):
        values["json_indent"] = env[CS.ENV_JSON_INDENT]
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return ConversionSettings(**values)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e
