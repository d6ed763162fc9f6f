"""Annotated Pydantic field types built on the shared formatters."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator

from peoplehub.common.formatters import parse_currency, parse_iso_date


def _coerce_date(value: Any) -> Any:
    if isinstance(value, str):
        return parse_iso_date(value.strip())
    return value


def _coerce_money(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        value = str(value)
    if isinstance(value, str):
        return parse_currency(value.strip())
    return value


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


# "" means "not set" for every optional form field
IsoDate = Annotated[Optional[date], BeforeValidator(_coerce_date)]
Money = Annotated[Optional[Decimal], BeforeValidator(_coerce_money)]
OptionalText = Annotated[Optional[str], BeforeValidator(_blank_to_none)]

RequiredDate = Annotated[date, BeforeValidator(_coerce_date)]
RequiredMoney = Annotated[Decimal, BeforeValidator(_coerce_money)]
RequiredText = Annotated[str, BeforeValidator(_blank_to_none)]
