"""Field formatters and validators shared by the API schemas and the forms.

All functions are pure: same input, same output, no side effects.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Optional

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DATE_ERROR = "Please enter a valid date (YYYY-MM-DD)"

_CENTS = Decimal("0.01")
_LEADING_NUMBER_RE = re.compile(r"\d*(?:\.\d*)?")
_PLAIN_NUMBER_RE = re.compile(r"^(?:\d+\.?\d*|\.\d+)$")

# Largest amount a NUMERIC(12, 2) column holds
MAX_AMOUNT = Decimal("9999999999.99")


# ── Dates ───────────────────────────────────────────────────────────

def is_valid_iso_date(raw: str) -> bool:
    """True for ``""`` or a literal ``YYYY-MM-DD`` naming a real calendar day.

    >>> is_valid_iso_date("2024-02-29"), is_valid_iso_date("2024-02-30")
    (True, False)
    """
    if raw == "":
        return True
    if not ISO_DATE_RE.match(raw):
        return False
    try:
        date.fromisoformat(raw)
    except ValueError:
        return False
    return True


def parse_iso_date(raw: str) -> Optional[date]:
    """Return the date named by *raw*, ``None`` for ``""``.

    Raises ``ValueError`` when *raw* fails :func:`is_valid_iso_date`.
    """
    if not is_valid_iso_date(raw):
        raise ValueError(DATE_ERROR)
    return date.fromisoformat(raw) if raw else None


# ── Currency ────────────────────────────────────────────────────────

def format_currency(raw: str) -> str:
    """Normalize a free-typed amount to ``$1,234.50`` style.

    Everything but digits and ``.`` is dropped; the longest leading number
    is kept (so ``"1.2.3"`` reads as ``1.2``). Returns ``""`` when nothing
    numeric remains. Display only: no upper bound applies here.
    """
    cleaned = re.sub(r"[^0-9.]", "", raw or "")
    match = _LEADING_NUMBER_RE.match(cleaned)
    number = match.group(0) if match else ""
    if not number.strip("."):
        return ""
    # Default precision (28 digits) is too small for long inputs
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(number) + 2)
        value = Decimal(number).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"${value:,.2f}"


def _strip_currency(raw: str) -> str:
    return raw.replace("$", "").replace(",", "").strip()


def is_valid_currency(raw: str) -> bool:
    """``""`` is valid; anything else must be a plain non-negative number
    (digits and at most one ``.``) once ``$`` and ``,`` are removed."""
    if raw == "":
        return True
    return bool(_PLAIN_NUMBER_RE.match(_strip_currency(raw)))


def parse_currency(raw: str) -> Optional[Decimal]:
    """Numeric value of a raw or formatted amount, ``None`` for ``""``.

    Raises ``ValueError`` for anything :func:`is_valid_currency` rejects and
    for amounts above :data:`MAX_AMOUNT` once rounded to cents.
    """
    if raw == "":
        return None
    if not is_valid_currency(raw):
        raise ValueError(f"'{raw}' is not a valid amount")
    digits = _strip_currency(raw)
    try:
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, len(digits) + 2)
            value = Decimal(digits).quantize(_CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"'{raw}' is not a valid amount") from exc
    if value > MAX_AMOUNT:
        raise ValueError(f"Amount must not exceed {format_currency(str(MAX_AMOUNT))}")
    return value
