from src.th_statement.domain.credits import (
    volume_credits_for,
    volume_credits_for_performance,
)
from src.th_statement.domain.models import Performance, Play


class TestBaseCredits:
    def test_thirty_earns_nothing(self) -> None:
        assert volume_credits_for("tragedy", 30) == 0

    def test_small_audience_never_negative(self) -> None:
        assert volume_credits_for("tragedy", 0) == 0

    def test_tragedy_thirty_five(self) -> None:
        assert volume_credits_for("tragedy", 35) == 5


class TestComedyBonus:
    def test_comedy_thirty_five(self) -> None:
        # 5 base + 35 // 5
        assert volume_credits_for("comedy", 35) == 12

    def test_bonus_below_threshold(self) -> None:
        assert volume_credits_for("comedy", 14) == 2

    def test_bonus_floors(self) -> None:
        assert volume_credits_for("comedy", 4) == 0


class TestOtherGenres:
    def test_unknown_genre_gets_base_only(self) -> None:
        assert volume_credits_for("history", 35) == 5

    def test_performance_helper(self) -> None:
        play = Play(name="Hamlet", type="tragedy")
        assert volume_credits_for_performance(Performance("hamlet", 55), play) == 25
