"""Load play catalogs and invoices from JSON documents.

plays.json:    {"hamlet": {"name": "Hamlet", "type": "tragedy"}, ...}
invoices.json: [{"customer": "BigCo", "performances": [{"playID": ..., "audience": ...}]}]
"""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from src.th_common.errors import InvalidPayloadError
from src.th_statement.application.schemas import InvoiceIn, PlayIn, plays_to_domain
from src.th_statement.domain.models import Invoice, Play

logger = logging.getLogger(__name__)

_PLAYS_ADAPTER = TypeAdapter(dict[str, PlayIn])
_INVOICES_ADAPTER = TypeAdapter(list[InvoiceIn])


def _read_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise InvalidPayloadError(f"{path.name}: not UTF-8 (byte {exc.start})") from exc
    except json.JSONDecodeError as exc:
        raise InvalidPayloadError(f"{path.name}: {exc.msg} at line {exc.lineno}") from exc


def parse_plays(raw: object) -> dict[str, Play]:
    try:
        return plays_to_domain(_PLAYS_ADAPTER.validate_python(raw))
    except ValidationError as exc:
        raise InvalidPayloadError(f"plays: {exc.error_count()} validation error(s)") from exc


def parse_invoices(raw: object) -> list[Invoice]:
    try:
        return [inv.to_domain() for inv in _INVOICES_ADAPTER.validate_python(raw)]
    except ValidationError as exc:
        raise InvalidPayloadError(f"invoices: {exc.error_count()} validation error(s)") from exc


def load_plays(path: str | Path) -> dict[str, Play]:
    path = Path(path)
    plays = parse_plays(_read_json(path))
    logger.info("Loaded %d plays from %s", len(plays), path)
    return plays


def load_invoices(path: str | Path) -> list[Invoice]:
    path = Path(path)
    invoices = parse_invoices(_read_json(path))
    logger.info("Loaded %d invoices from %s", len(invoices), path)
    return invoices
