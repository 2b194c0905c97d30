"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


logger = logging.getLogger("uvicorn.error")

ALLOW_GENERATION_ENV = "NBA_LEGENDS_ALLOW_GENERATION"
IMAGE_LOOKUP_ENV = "NBA_LEGENDS_IMAGE_LOOKUP"
IMAGE_TIMEOUT_ENV = "NBA_LEGENDS_IMAGE_TIMEOUT"
SEED_ENV = "NBA_LEGENDS_SEED"
HOST_ENV = "HOST"
PORT_ENV = "PORT"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    allow_generation: bool = True
    image_lookup: bool = False
    image_timeout: float = 3.0
    seed: Optional[int] = None
    host: str = "127.0.0.1"
    port: int = 3000


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning("Invalid boolean for %s: %s; using default %s", name, raw, default)
    return default


def _env_float(
    env: Mapping[str, str],
    name: str,
    default: float,
    *,
    clamp_min: float | None = None,
    clamp_max: float | None = None,
) -> float:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    if clamp_max is not None:
        value = min(clamp_max, value)
    return value


def _env_int(env: Mapping[str, str], name: str, default: int | None, *, min_value: int | None = None) -> int | None:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %s", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from ``env`` (defaults to ``os.environ``)."""

    env = os.environ if env is None else env
    defaults = Settings()
    return Settings(
        allow_generation=_env_bool(env, ALLOW_GENERATION_ENV, defaults.allow_generation),
        image_lookup=_env_bool(env, IMAGE_LOOKUP_ENV, defaults.image_lookup),
        image_timeout=_env_float(env, IMAGE_TIMEOUT_ENV, defaults.image_timeout, clamp_min=0.1, clamp_max=30.0),
        seed=_env_int(env, SEED_ENV, defaults.seed),
        host=env.get(HOST_ENV) or defaults.host,
        port=_env_int(env, PORT_ENV, defaults.port, min_value=1) or defaults.port,
    )
