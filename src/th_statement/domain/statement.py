"""Statement calculation and plain-text rendering.

A statement is a single pass over the invoice's performances:
price first (unknown genres fail here), then credits, then accumulate.
Nothing is returned until every line is computed, so a failure never
yields a partial statement.

Text format (every line terminated by line_sep):
    Statement for BigCo
      Hamlet: $650.00 (55 seats)
    Amount owed is $650.00
    You earned 25 credits
"""
import os
from collections.abc import Mapping

from src.th_common.cents import cents_to_display
from src.th_statement.domain.credits import volume_credits_for_performance
from src.th_statement.domain.models import (
    Invoice,
    Play,
    StatementData,
    StatementLine,
    play_for,
)
from src.th_statement.domain.pricing import amount_cents_for_performance


def build_statement(invoice: Invoice, plays: Mapping[str, Play]) -> StatementData:
    lines: list[StatementLine] = []
    total_amount = 0
    volume_credits = 0
    for perf in invoice.performances:
        play = play_for(perf, plays)
        line_cents = amount_cents_for_performance(perf, play)
        line_credits = volume_credits_for_performance(perf, play)
        lines.append(
            StatementLine(
                play_name=play.name,
                audience=perf.audience,
                amount_cents=line_cents,
                volume_credits=line_credits,
            )
        )
        total_amount += line_cents
        volume_credits += line_credits
    return StatementData(
        customer=invoice.customer,
        lines=tuple(lines),
        total_amount_cents=total_amount,
        volume_credits=volume_credits,
    )


def render_plain_text(data: StatementData, line_sep: str = os.linesep) -> str:
    out = [f"Statement for {data.customer}"]
    for line in data.lines:
        out.append(
            f"  {line.play_name}: {cents_to_display(line.amount_cents)} ({line.audience} seats)"
        )
    out.append(f"Amount owed is {cents_to_display(data.total_amount_cents)}")
    out.append(f"You earned {data.volume_credits} credits")
    return "".join(row + line_sep for row in out)


class StatementPrinter:
    """Statement for one invoice against one play catalog.

    Holds non-owning references; callers may swap ``invoice`` or ``plays``
    between calls. Each call recomputes from scratch.
    """

    def __init__(
        self,
        invoice: Invoice,
        plays: Mapping[str, Play],
        line_sep: str = os.linesep,
    ) -> None:
        self.invoice = invoice
        self.plays = plays
        self.line_sep = line_sep

    def statement_data(self) -> StatementData:
        return build_statement(self.invoice, self.plays)

    def statement(self) -> str:
        """Return the formatted statement.

        Raises UnknownPlayTypeError if a play's genre is not known and
        PlayNotFoundError if a performance references a missing play.
        """
        return render_plain_text(self.statement_data(), self.line_sep)
