from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

ENV_PREFIX = "WIDGETPOD_"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings shared by the server and the client.

    Notes
    - cors_allow_origins defaults to ["*"]; the panel is usually served from another origin.
    - request_timeout None means requests wait forever (a hung call keeps the optimistic state).
    - revert_failed_updates switches update failures to the same revert path as add/delete.
    """

    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])
    api_base_url: str = "http://127.0.0.1:8000"
    request_timeout: Optional[float] = None
    revert_failed_updates: bool = False
    log_level: str = "info"

    @staticmethod
    def normalize_base_url(url: str) -> str:
        return (url or "").strip().rstrip("/")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        def get(name: str) -> str:
            return (env.get(ENV_PREFIX + name) or "").strip()

        kwargs = {}
        origins = [o.strip() for o in get("CORS_ALLOW_ORIGINS").split(",") if o.strip()]
        if origins:
            kwargs["cors_allow_origins"] = origins
        if get("API_BASE_URL"):
            kwargs["api_base_url"] = cls.normalize_base_url(get("API_BASE_URL"))
        if get("REQUEST_TIMEOUT"):
            try:
                kwargs["request_timeout"] = float(get("REQUEST_TIMEOUT"))
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}REQUEST_TIMEOUT must be a number of seconds") from None
        if get("REVERT_FAILED_UPDATES"):
            kwargs["revert_failed_updates"] = get("REVERT_FAILED_UPDATES").lower() in _TRUTHY
        if get("LOG_LEVEL"):
            kwargs["log_level"] = get("LOG_LEVEL").lower()
        return cls(**kwargs)
