"""
thermoreport/analytics/dates.py
───────────────────────────────
Date normalizer for the heterogeneous date strings sent by the report API.

format_date() resolution order (first match wins):
  1. exact DD/MM/YYYY            → returned untouched
  2. general parse (pandas)      → rendered in the locale's numeric format;
                                   only for text holding a full date, and
                                   year-first text is never read day-first
  3. DD/MM/YYYY or DD-MM-YYYY anywhere in the text
  4. YYYY/MM/DD or YYYY-MM-DD anywhere in the text
  5. nothing matched             → ""

The target locale is always explicit (defaults to settings.LOCALE) so output
never depends on the host's locale. Unparseable input yields "" and never
raises.
"""
from __future__ import annotations

import logging
import re
import warnings
from datetime import date

import pandas as pd

from config.settings import settings
from thermoreport.i18n.translator import lookup, resolve_locale

logger = logging.getLogger(__name__)

_DMY_EXACT = re.compile(r"^\d{2}/\d{2}/\d{4}$")
_DMY_ANYWHERE = re.compile(r"(\d{2})[/-](\d{2})[/-](\d{4})")
_YMD_ANYWHERE = re.compile(r"(\d{4})[/-](\d{2})[/-](\d{2})")
# A general parse is only trusted when the text carries a complete date
_FULL_DATE = re.compile(r"\d{4}[/.-]\d{1,2}[/.-]\d{1,2}|\d{1,2}[/.-]\d{1,2}[/.-]\d{4}")
_YEAR_FIRST = re.compile(r"^\d{4}[/.-]")


def _locale_format(locale: str) -> str:
    return lookup("dates.format", locale, default="%d/%m/%Y")


def _render(value: date, locale: str) -> str:
    # Explicit zero padding; strftime pads years < 1000 differently per platform
    return (
        _locale_format(locale)
        .replace("%d", f"{value.day:02d}")
        .replace("%m", f"{value.month:02d}")
        .replace("%Y", f"{value.year:04d}")
    )


def _build_date(year: str, month: str, day: str) -> date | None:
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def _general_parse(text: str, locale: str) -> date | None:
    # Keyword dates ("now"), bare times ("10:00") and partial dates ("1/2")
    # would be completed from the clock
    if not _FULL_DATE.search(text):
        return None
    # ISO-style text is year-month-day whatever the locale's order
    dayfirst = not _YEAR_FIRST.match(text) and _locale_format(locale).startswith("%d")
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            parsed = pd.to_datetime(text, errors="coerce", dayfirst=dayfirst)
    except (ValueError, TypeError, OverflowError):
        return None
    if parsed is None or pd.isna(parsed):
        return None
    return parsed.date()


def parse_date(raw: str | None, locale: str | None = None) -> date | None:
    """Resolve a raw date string to a calendar date (steps 2–4), or None."""
    if not raw:
        return None
    locale = resolve_locale(locale or settings.LOCALE)
    cleaned = raw.strip()

    parsed = _general_parse(cleaned, locale)
    if parsed is not None:
        return parsed

    match = _DMY_ANYWHERE.search(cleaned)
    if match:
        day, month, year = match.groups()
        parsed = _build_date(year, month, day)
        if parsed is not None:
            return parsed

    match = _YMD_ANYWHERE.search(cleaned)
    if match:
        year, month, day = match.groups()
        parsed = _build_date(year, month, day)
        if parsed is not None:
            return parsed

    logger.debug("Unparseable date %r", raw)
    return None


def format_date(raw: str | None, locale: str | None = None) -> str:
    """Render a raw date as DD/MM/YYYY (locale convention), or "" if unparseable."""
    if not raw:
        return ""
    cleaned = raw.strip()
    if _DMY_EXACT.match(cleaned):
        return cleaned
    locale = resolve_locale(locale or settings.LOCALE)
    parsed = parse_date(cleaned, locale)
    return _render(parsed, locale) if parsed is not None else ""


def format_month_year(raw: str | None, locale: str | None = None) -> str:
    """Month name and year only, e.g. "março 2024"."""
    locale = resolve_locale(locale or settings.LOCALE)
    parsed = parse_date(raw, locale)
    if parsed is None:
        return ""
    month = lookup(f"dates.months.{parsed.month}", locale, default=str(parsed.month))
    template = lookup("dates.month_year", locale, default="{month} {year}")
    text = template.format(month=month, year=parsed.year)
    for connector in lookup("dates.connectors", locale, default=[]):
        text = re.sub(rf"\b{re.escape(connector)}\s+", "", text)
    return text
