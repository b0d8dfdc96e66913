"""Row conversion helpers shared by the Supabase repositories."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID


def parse_timestamp(raw: object) -> datetime:
    """Parse an ISO timestamp column, falling back to datetime.min."""
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return datetime.min


def parse_decimal(raw: object) -> Decimal | None:
    """Parse a numeric column that PostgREST may return as str or float."""
    if raw is None or raw == "":
        return None
    return Decimal(str(raw))


def to_row(payload: dict[str, object]) -> dict[str, object]:
    """Convert payload values into JSON-friendly column values."""
    row: dict[str, object] = {}
    for key, value in payload.items():
        if isinstance(value, (UUID, Decimal)):
            row[key] = str(value)
        elif isinstance(value, datetime):
            row[key] = value.isoformat()
        else:
            row[key] = value
    return row
