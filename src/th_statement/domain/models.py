"""Statement domain models — frozen dataclasses, no framework dependency."""
from collections.abc import Mapping
from dataclasses import dataclass, field

from src.th_common.errors import InvalidAudienceError, PlayNotFoundError


@dataclass(frozen=True)
class Play:
    name: str
    type: str  # tragedy / comedy; anything else is rejected by pricing


@dataclass(frozen=True)
class Performance:
    play_id: str
    audience: int

    def __post_init__(self) -> None:
        if self.audience < 0:
            raise InvalidAudienceError(self.audience)


@dataclass(frozen=True)
class Invoice:
    customer: str
    performances: tuple[Performance, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence from callers but store it immutably
        object.__setattr__(self, "performances", tuple(self.performances))


def play_for(performance: Performance, plays: Mapping[str, Play]) -> Play:
    """Resolve a performance to its play; a missing catalog entry is fatal."""
    try:
        return plays[performance.play_id]
    except KeyError:
        raise PlayNotFoundError(performance.play_id) from None


@dataclass(frozen=True)
class StatementLine:
    """One priced performance."""

    play_name: str
    audience: int
    amount_cents: int
    volume_credits: int


@dataclass(frozen=True)
class StatementData:
    customer: str
    lines: tuple[StatementLine, ...] = field(default_factory=tuple)
    total_amount_cents: int = 0
    volume_credits: int = 0
