from __future__ import annotations

import math
from datetime import date
from typing import Callable

from stockcheck.errors import LookupValidationError
from stockcheck.schemas.lookup import LookupRequest

MAX_UNITS = 1_000_000_000


def validate_lookup_form(
    req: LookupRequest,
    *,
    today: Callable[[], date] = date.today,
) -> tuple[str, date, float]:
    """Normalize the three form fields into (symbol, purchase_date, units)."""
    symbol = (req.symbol or "").strip().upper()
    raw_date = (req.purchase_date or "").strip()
    raw_units = req.units.strip() if isinstance(req.units, str) else req.units

    if not symbol or not raw_date or raw_units is None or raw_units == "":
        raise LookupValidationError("Please fill all fields")

    try:
        purchase_date = date.fromisoformat(raw_date)
    except ValueError as exc:
        raise LookupValidationError("Purchase date must be YYYY-MM-DD") from exc
    if purchase_date > today():
        raise LookupValidationError("Purchase date cannot be in the future")

    try:
        units = float(raw_units)
    except (TypeError, ValueError) as exc:
        raise LookupValidationError("Units must be a number") from exc
    if not math.isfinite(units):
        raise LookupValidationError("Units must be a number")
    if units <= 0:
        raise LookupValidationError("Units must be greater than zero")
    if units > MAX_UNITS:
        raise LookupValidationError(f"Units cannot exceed {MAX_UNITS:,}")

    return symbol, purchase_date, units
