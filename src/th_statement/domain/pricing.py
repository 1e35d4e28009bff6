"""Pricing rule table — maps (genre, audience) to a charge in cents.

tragedy: 40000 base, +1000 per attendee above 30.
comedy:  30000 base, +10000 flat +500 per attendee above 20,
         then +300 per attendee unconditionally.
"""
from collections.abc import Callable

from src.th_common.enums import PlayType
from src.th_common.errors import UnknownPlayTypeError
from src.th_statement.domain.models import Performance, Play

TRAGEDY_BASE_AMOUNT = 40_000
TRAGEDY_AUDIENCE_THRESHOLD = 30
TRAGEDY_EXTRA_PER_AUDIENCE = 1_000

COMEDY_BASE_AMOUNT = 30_000
COMEDY_AUDIENCE_THRESHOLD = 20
COMEDY_OVER_BASE_CAPACITY_AMOUNT = 10_000
COMEDY_OVER_BASE_CAPACITY_PER_PERSON = 500
COMEDY_AMOUNT_PER_AUDIENCE = 300


def resolve_play_type(play_type: str) -> PlayType:
    """Raise UnknownPlayTypeError(6001) if the genre is not a PlayType."""
    try:
        return PlayType(play_type)
    except ValueError:
        raise UnknownPlayTypeError(play_type) from None


def _tragedy_amount(audience: int) -> int:
    amount = TRAGEDY_BASE_AMOUNT
    if audience > TRAGEDY_AUDIENCE_THRESHOLD:
        amount += TRAGEDY_EXTRA_PER_AUDIENCE * (audience - TRAGEDY_AUDIENCE_THRESHOLD)
    return amount


def _comedy_amount(audience: int) -> int:
    amount = COMEDY_BASE_AMOUNT
    if audience > COMEDY_AUDIENCE_THRESHOLD:
        amount += COMEDY_OVER_BASE_CAPACITY_AMOUNT + (
            COMEDY_OVER_BASE_CAPACITY_PER_PERSON * (audience - COMEDY_AUDIENCE_THRESHOLD)
        )
    amount += COMEDY_AMOUNT_PER_AUDIENCE * audience
    return amount


# Must cover every PlayType member
_PRICING_RULES: dict[PlayType, Callable[[int], int]] = {
    PlayType.TRAGEDY: _tragedy_amount,
    PlayType.COMEDY: _comedy_amount,
}


def amount_cents_for(play_type: str, audience: int) -> int:
    return _PRICING_RULES[resolve_play_type(play_type)](audience)


def amount_cents_for_performance(performance: Performance, play: Play) -> int:
    return amount_cents_for(play.type, performance.audience)
