"""StatementApplicationService — thin composition layer.

Converts request schemas to domain values, runs the pure statement core,
and wraps the result for the API. Stateless; safe to share across requests.
"""

import logging

from src.th_statement.application.schemas import (
    StatementRequest,
    StatementResponse,
    plays_to_domain,
)
from src.th_statement.domain.models import StatementData
from src.th_statement.domain.statement import build_statement, render_plain_text

logger = logging.getLogger(__name__)


class StatementApplicationService:
    def __init__(self, line_sep: str) -> None:
        self._line_sep = line_sep

    def _compute(self, req: StatementRequest) -> StatementData:
        invoice = req.invoice.to_domain()
        data = build_statement(invoice, plays_to_domain(req.plays))
        logger.debug(
            "Statement computed: customer=%s, lines=%d, total=%d, credits=%d",
            data.customer,
            len(data.lines),
            data.total_amount_cents,
            data.volume_credits,
        )
        return data

    def create_statement(self, req: StatementRequest) -> StatementResponse:
        data = self._compute(req)
        return StatementResponse.from_domain(data, render_plain_text(data, self._line_sep))

    def render_text(self, req: StatementRequest) -> str:
        return render_plain_text(self._compute(req), self._line_sep)
