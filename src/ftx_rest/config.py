"""Client configuration.

Defaults target the production API. A YAML file can override them::

    base_url: https://ftx.com
    api_prefix: /api
    timeout: 10
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional

import yaml

BASE_URL = "https://ftx.com"
API_PREFIX = "/api"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    base_url: str = BASE_URL
    api_prefix: str = API_PREFIX
    timeout: Optional[float] = None  # seconds; used when execute() gets none

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout!r}")

    @classmethod
    def from_dict(cls, data: dict) -> "ClientConfig":
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str) -> "ClientConfig":
        with open(path, "r") as f:
            return cls.from_dict(yaml.safe_load(f) or {})
