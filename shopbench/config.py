from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]  # .../shopbench repo
load_dotenv(dotenv_path=ROOT_DIR / ".env")

SERVICES = ("shopcart", "parser")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int | None = None) -> int | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return int(v)


def _get_path(*keys: str, default: str) -> str:
    v = _get_env(*keys, default=default)
    return str(v)


@dataclass(frozen=True)
class Settings:
    service: str
    host: str
    port: int
    static_data_path: str
    log_level: str


settings = Settings(
    service=(_get_env("SERVICE", "SHOPBENCH_SERVICE", default="shopcart") or "shopcart").lower(),
    host=_get_env("HOST", default="0.0.0.0") or "0.0.0.0",
    port=_get_int("PORT", "HTTP_PORT", default=8080) or 8080,
    # relative to the working directory, like the benchmark runner expects
    static_data_path=_get_path("STATIC_DATA_PATH", "PRICES_PATH", default="static-data"),
    log_level=(_get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
)

if settings.service not in SERVICES:
    raise RuntimeError(f"SERVICE must be one of {', '.join(SERVICES)}, got {settings.service!r}")
