"""Runtime configuration.

Values come from QRSTAMP_* environment variables with the defaults below;
the CLI overrides individual fields from its flags.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional
import os

ENV_PREFIX = "QRSTAMP_"


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}")


@dataclass
class StampConfig:
    output_dir: str = "output"
    name_prefix: str = "qrcode"
    set_id: int = 0
    pages: int = 1
    box_size: int = 10
    border: int = 4
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "StampConfig":
        env = os.environ if env is None else env
        return cls(
            output_dir=env.get(ENV_PREFIX + "OUTPUT_DIR", cls.output_dir),
            name_prefix=env.get(ENV_PREFIX + "PREFIX", cls.name_prefix),
            set_id=_env_int(env, "SET_ID", cls.set_id),
            pages=_env_int(env, "PAGES", cls.pages),
            box_size=_env_int(env, "BOX_SIZE", cls.box_size),
            border=_env_int(env, "BORDER", cls.border),
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", cls.log_level).upper(),
        )
