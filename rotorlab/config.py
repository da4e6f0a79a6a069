from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    # Output
    group_size: int = Field(default=5, ge=1, le=80, description="Symbols per output group")

    # Diagnostics
    verbose: bool = Field(default=False, description="Trace every converted character")
    log_level: str = Field(default="INFO")

    # Evaluation / reproducibility
    global_seed: int = Field(default=1337)
    roundtrip_messages: int = Field(default=200, ge=1)
    roundtrip_message_length: int = Field(default=60, ge=1)
    period_limit: int = Field(default=100_000, ge=1)

    # Paths
    project_root: str = Field(default=os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir)))
    runs_dir: str = Field(default="runs")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    def _bool(name: str, default: bool) -> bool:
        v = os.getenv(name)
        if v is None:
            return default
        return v.strip().lower() in {"1", "true", "yes", "y", "on"}

    return Settings(
        group_size=int(os.getenv("ROTORLAB_GROUP_SIZE", "5")),
        verbose=_bool("ROTORLAB_VERBOSE", False),
        log_level=os.getenv("ROTORLAB_LOG_LEVEL", "INFO").upper(),
        global_seed=int(os.getenv("ROTORLAB_SEED", "1337")),
        roundtrip_messages=int(os.getenv("ROTORLAB_ROUNDTRIP_MESSAGES", "200")),
        roundtrip_message_length=int(os.getenv("ROTORLAB_ROUNDTRIP_LENGTH", "60")),
        period_limit=int(os.getenv("ROTORLAB_PERIOD_LIMIT", "100000")),
        runs_dir=os.getenv("ROTORLAB_RUNS_DIR", "runs"),
    )
