"""Global enums."""

from enum import Enum


class PlayType(str, Enum):
    """Play genre: drives both the pricing table and the credit bonus."""
    TRAGEDY = "tragedy"
    COMEDY = "comedy"
