from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_TIMEOUT_SEC: float = 300.0


def _required_from_env(name: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        raise ValueError(f"environment variable {name} must be set")
    return raw


def _optional_from_env(name: str) -> str | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw


def _float_from_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True, slots=True)
class Config:
    base_url: str
    access_token: str
    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    admin_token: str | None = None  # only needed for language management

    def __post_init__(self) -> None:
        if not self.base_url.strip():
            raise ValueError("base_url must not be empty")

    def __repr__(self) -> str:
        # keep the tokens out of logs and tracebacks
        admin = "'***'" if self.admin_token is not None else "None"
        return (
            f"Config(base_url={self.base_url!r}, access_token='***', "
            f"timeout_sec={self.timeout_sec!r}, admin_token={admin})"
        )

    def run_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/run"

    def languages_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/admin/languages"

    @staticmethod
    def from_env() -> "Config":
        return Config(
            base_url=_required_from_env("GLOT_RUN_BASE_URL"),
            access_token=_required_from_env("GLOT_RUN_ACCESS_TOKEN"),
            timeout_sec=_float_from_env("GLOT_RUN_TIMEOUT_SEC", DEFAULT_TIMEOUT_SEC),
            admin_token=_optional_from_env("GLOT_RUN_ADMIN_TOKEN"),
        )


@lru_cache(maxsize=1)
def get_config() -> Config:
    return Config.from_env()
