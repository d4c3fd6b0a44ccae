from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class MachineSpec(BaseModel):
    """Structured description of a rotor machine session.

    The alphabet and plugboard are fixed; the spec only chooses how many
    rotors to stack and which seed drives the random wiring. Two sessions
    built from the same seeded spec are identical.
    """

    name: str = Field(default="enigma-94", min_length=1, max_length=80)
    num_rotors: int = Field(default=50, ge=1, le=500)
    seed: Optional[int] = Field(default=None, description="None means a fresh, non-reproducible session")

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v
