from __future__ import annotations
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARN"
    log_json: bool = False

    @staticmethod
    def from_env(env: Optional[Mapping[str, str]] = None) -> "Settings":
        src = os.environ if env is None else env
        return Settings(
            log_level=src.get("NULLKIT_LOG_LEVEL", "WARN").strip().upper() or "WARN",
            log_json=src.get("NULLKIT_LOG_JSON", "").strip().lower() in _TRUTHY,
        )

    def with_overrides(self, **overrides: Any) -> "Settings":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
