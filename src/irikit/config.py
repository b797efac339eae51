"""Settings model and YAML loader."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_CONFIG_PATH = Path("config/irikit.yaml")


def _default_ports() -> Dict[str, int]:
    return {"http": 80, "https": 443, "ftp": 21}


class IRISettings(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    default_mode: str = "lenient"
    default_ports: Dict[str, int] = Field(default_factory=_default_ports)
    http_schemes: Tuple[str, ...] = ("http", "https")

    @field_validator("default_mode", mode="before")
    @classmethod
    def _coerce_mode(cls, value: Any) -> str:
        mode = str(value or "lenient").strip().lower()
        if mode not in {"lenient", "strict"}:
            raise ValueError(f"default_mode must be 'lenient' or 'strict', not {value!r}")
        return mode

    @field_validator("default_ports", mode="before")
    @classmethod
    def _coerce_ports(cls, value: Any) -> Dict[str, int]:
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValueError("default_ports must be a mapping of scheme to port")
        ports: Dict[str, int] = {}
        for scheme, port in value.items():
            number = int(port)
            if number <= 0:
                raise ValueError(f"default port for {scheme!r} must be positive")
            ports[str(scheme).strip().lower()] = number
        return ports

    @field_validator("http_schemes", mode="before")
    @classmethod
    def _coerce_schemes(cls, value: Any) -> Tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            tokens = value.split(",")
        else:
            tokens = [str(item) for item in value]
        return tuple(token.strip().lower() for token in tokens if token.strip())


DEFAULT_SETTINGS = IRISettings()


@lru_cache(maxsize=4)
def load_settings(path: str | Path | None = None) -> IRISettings:
    """Load settings from YAML, falling back to defaults when the file is absent."""
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        return DEFAULT_SETTINGS
    with config_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"IRI configuration must be a mapping: {config_path}")
    try:
        return IRISettings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid IRI configuration: {exc}") from exc


__all__ = ["DEFAULT_CONFIG_PATH", "DEFAULT_SETTINGS", "IRISettings", "load_settings"]
