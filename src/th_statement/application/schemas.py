"""Pydantic schemas for th_statement input documents and API responses.

Input mirrors the JSON shape of invoices.json / plays.json:
  {"customer": "BigCo", "performances": [{"playID": "hamlet", "audience": 55}]}
  {"hamlet": {"name": "Hamlet", "type": "tragedy"}}
``play_id`` is accepted as well as ``playID``.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.th_common.cents import cents_to_display
from src.th_statement.domain.models import (
    Invoice,
    Performance,
    Play,
    StatementData,
    StatementLine,
)

# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class PlayIn(BaseModel):
    name: str
    # Not constrained to PlayType: unknown genres must reach pricing and fail there
    type: str

    def to_domain(self) -> Play:
        return Play(name=self.name, type=self.type)


class PerformanceIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    play_id: str = Field(alias="playID")
    audience: int = Field(ge=0)

    def to_domain(self) -> Performance:
        return Performance(play_id=self.play_id, audience=self.audience)


class InvoiceIn(BaseModel):
    customer: str
    performances: list[PerformanceIn] = Field(default_factory=list)

    def to_domain(self) -> Invoice:
        return Invoice(
            customer=self.customer,
            performances=tuple(p.to_domain() for p in self.performances),
        )


def plays_to_domain(plays: dict[str, PlayIn]) -> dict[str, Play]:
    return {play_id: p.to_domain() for play_id, p in plays.items()}


class StatementRequest(BaseModel):
    invoice: InvoiceIn
    plays: dict[str, PlayIn]


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class StatementLineOut(BaseModel):
    play_name: str
    audience: int
    amount_cents: int
    amount_display: str
    volume_credits: int

    @classmethod
    def from_domain(cls, line: StatementLine) -> "StatementLineOut":
        return cls(
            play_name=line.play_name,
            audience=line.audience,
            amount_cents=line.amount_cents,
            amount_display=cents_to_display(line.amount_cents),
            volume_credits=line.volume_credits,
        )


class StatementResponse(BaseModel):
    customer: str
    lines: list[StatementLineOut]
    total_amount_cents: int
    total_amount_display: str
    volume_credits: int
    text: str

    @classmethod
    def from_domain(cls, data: StatementData, text: str) -> "StatementResponse":
        return cls(
            customer=data.customer,
            lines=[StatementLineOut.from_domain(line) for line in data.lines],
            total_amount_cents=data.total_amount_cents,
            total_amount_display=cents_to_display(data.total_amount_cents),
            volume_credits=data.volume_credits,
            text=text,
        )
