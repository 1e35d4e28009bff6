"""Volume credit calculation.

Every genre earns one credit per attendee above 30; comedies earn an extra
credit for every five attendees. Unknown genres get the base credits only.
"""
from src.th_common.enums import PlayType
from src.th_statement.domain.models import Performance, Play

BASE_VOLUME_CREDIT_THRESHOLD = 30
COMEDY_EXTRA_VOLUME_FACTOR = 5


def volume_credits_for(play_type: str, audience: int) -> int:
    credits = max(audience - BASE_VOLUME_CREDIT_THRESHOLD, 0)
    if play_type == PlayType.COMEDY:
        credits += audience // COMEDY_EXTRA_VOLUME_FACTOR
    return credits


def volume_credits_for_performance(performance: Performance, play: Play) -> int:
    return volume_credits_for(play.type, performance.audience)
