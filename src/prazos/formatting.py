"""
Prazos Formatting

Date formatting and document placeholder values.

Documents display dates as DD/MM/YYYY; ISO YYYY-MM-DD is the canonical
key everywhere else.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Mapping, Optional

from .exceptions import InvalidInputError
from .models import CalculationOutcome
from .usage import NOT_INFORMED

BR_DATE_FORMAT = "%d/%m/%Y"

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def format_br(d: Optional[date]) -> str:
    """Format a date as DD/MM/YYYY (empty string for None)."""
    if d is None:
        return ""
    return d.strftime(BR_DATE_FORMAT)


def parse_date(value: str) -> date:
    """Parse an ISO (YYYY-MM-DD) or Brazilian (DD/MM/YYYY) date string."""
    text = value.strip()
    for parser in (date.fromisoformat, lambda s: datetime.strptime(s, BR_DATE_FORMAT).date()):
        try:
            return parser(text)
        except ValueError:
            continue
    raise InvalidInputError(
        message=f"Invalid date: {value!r} (use YYYY-MM-DD or DD/MM/YYYY)",
        details={"value": value},
    )


def document_placeholders(
    outcome: CalculationOutcome,
    filing_date: Optional[date] = None,
) -> dict[str, str]:
    """Placeholder values for document templates, from the current scenario."""
    return {
        "numeroProcesso": outcome.process_number or NOT_INFORMED,
        "dataDisponibilizacao": format_br(outcome.availability_date),
        "dataPublicacao": format_br(outcome.publication_date),
        "inicioPrazo": format_br(outcome.deadline_start_date),
        "prazoDias": str(outcome.deadline_length_days),
        "prazoFinal": format_br(outcome.proven_final),
        "dataInterposicao": format_br(filing_date),
    }


def fill_placeholders(template: str, values: Mapping[str, str]) -> str:
    """Replace {{name}} markers; unknown markers are left as they are."""
    return _PLACEHOLDER.sub(lambda m: values.get(m.group(1), m.group(0)), template)
