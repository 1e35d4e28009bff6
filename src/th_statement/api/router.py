"""th_statement REST endpoints.

POST /statements        — statement as JSON (lines, totals, rendered text)
POST /statements/text   — statement as text/plain
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from config.settings import settings
from src.th_common.response import ApiResponse, bind_request_id, success_response
from src.th_statement.application.schemas import StatementRequest
from src.th_statement.application.service import StatementApplicationService

router = APIRouter(prefix="/statements", tags=["statements"])

_service = StatementApplicationService(line_sep=settings.STATEMENT_LINE_SEPARATOR)


@router.post("")
async def create_statement(body: StatementRequest, request: Request) -> ApiResponse:
    result = _service.create_statement(body)
    return bind_request_id(success_response(result.model_dump()), request)


@router.post("/text", response_class=PlainTextResponse)
async def create_statement_text(body: StatementRequest) -> PlainTextResponse:
    return PlainTextResponse(_service.render_text(body))
