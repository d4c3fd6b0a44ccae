from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    # Machine
    num_rotors: int = Field(default=50, ge=1, le=500)
    seed: Optional[int] = Field(default=None, description="None means a time/entropy seeded session")

    # Logging
    log_level: str = Field(default="INFO")

    # Evaluation
    roundtrip_vectors: int = Field(default=200, ge=1)
    message_length: int = Field(default=64, ge=1)

    # Paths
    runs_dir: str = Field(default="runs")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return v


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    seed = os.getenv("ENIGMA_SEED")

    return Settings(
        num_rotors=int(os.getenv("ENIGMA_NUM_ROTORS", "50")),
        seed=int(seed) if seed not in (None, "") else None,
        log_level=os.getenv("ENIGMA_LOG_LEVEL", "INFO"),
        roundtrip_vectors=int(os.getenv("ENIGMA_ROUNDTRIP_VECTORS", "200")),
        message_length=int(os.getenv("ENIGMA_MESSAGE_LENGTH", "64")),
        runs_dir=os.getenv("ENIGMA_RUNS_DIR", "runs"),
    )
