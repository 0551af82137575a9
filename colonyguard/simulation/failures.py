"""Failure tokens returned by player commands.

Commands return ``None`` on success or one of these members on failure.
Members are plain strings so a shell can print them as-is.
"""

from __future__ import annotations

from enum import Enum


class Failure(str, Enum):
    """Why a player command was refused.  State is left unchanged."""

    NOT_ENOUGH_FOOD = "not enough food"
    OCCUPIED = "tunnel already occupied"
    UNKNOWN_BOOST = "no such boost"
    NO_ANT = "no Ant at location"
    UNKNOWN_ANT_TYPE = "unknown ant type"
    ILLEGAL_LOCATION = "illegal location"

    def __str__(self) -> str:
        return self.value
