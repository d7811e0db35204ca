# src/ftt_parser/dates/edtf.py

"""
EDTF-like date grammar used by FTT date slots.

Accepted forms:

    ?                   unknown
    ..                  open-ended
    [start..end]        range; either side may be omitted ("[..1910]")
    YYYY                year            (any number of digits, which may be X: "19XX", "850")
    YYYY-MM             month           (MM 01-12, or XX)
    YYYY-21..24         season          (spring, summer, autumn, winter)
    YYYY-MM-DD          day             (DD checked against the month)
    -YYYY...            BCE years ("-500", "-0044")

Any single date may end with a tolerance suffix:
    ?  uncertain    ~  approximate    %  uncertain and approximate
"""

from __future__ import annotations

import calendar
import re
from typing import Any, Dict, Optional

UNKNOWN = "?"
OPEN = ".."

SINGLE_DATE = re.compile(
    r"^(?P<sign>-)?(?P<year>[0-9X]+)"
    r"(?:-(?P<month>[0-9]{2}|XX)(?:-(?P<day>[0-9]{2}|XX))?)?"
    r"(?P<suffix>[?~%])?$"
)

SEASONS = {
    21: "SPRING",
    22: "SUMMER",
    23: "AUTUMN",
    24: "WINTER",
}

QUALIFIERS = {
    "?": "uncertain",
    "~": "approximate",
    "%": "uncertain-approximate",
}

# Days per month when the year is unknown (February may be a leap month).
MAX_DAYS = {
    1: 31, 2: 29, 3: 31, 4: 30, 5: 31, 6: 30,
    7: 31, 8: 31, 9: 30, 10: 31, 11: 30, 12: 31,
}


def _max_day(year: str, month: int) -> int:
    if month == 2 and year.isdigit():
        return 29 if calendar.isleap(int(year)) else 28
    return MAX_DAYS[month]


def _parse_single(raw: str) -> Optional[Dict[str, Any]]:
    """Parse one date without brackets or range markers."""
    m = SINGLE_DATE.match(raw)
    if not m:
        return None

    year = m.group("year")
    month = m.group("month")
    day = m.group("day")
    result: Dict[str, Any] = {
        "raw": raw,
        "kind": "exact",
        "precision": "year",
        "date": (m.group("sign") or "") + year,
        "season": None,
        "qualifier": QUALIFIERS.get(m.group("suffix") or ""),
    }

    if month is None:
        return result

    if month != "XX":
        month_num = int(month)
        if month_num in SEASONS:
            if day is not None:
                return None
            result.update(kind="seasonal", precision="season", season=SEASONS[month_num])
            result["date"] = f"{result['date']}-{month}"
            return result
        if not 1 <= month_num <= 12:
            return None

    result["precision"] = "month"
    result["date"] = f"{result['date']}-{month}"

    if day is None:
        return result

    if day != "XX":
        day_num = int(day)
        limit = 31 if month == "XX" else _max_day(year, int(month))
        if not 1 <= day_num <= limit:
            return None

    result["precision"] = "day"
    result["date"] = f"{result['date']}-{day}"
    return result


def _parse_range(raw: str) -> Optional[Dict[str, Any]]:
    inner = raw[1:-1]
    if inner.count(OPEN) != 1:
        return None

    start_raw, end_raw = inner.split(OPEN)
    start_raw, end_raw = start_raw.strip(), end_raw.strip()
    if not start_raw and not end_raw:
        return None

    start = _parse_single(start_raw) if start_raw else None
    end = _parse_single(end_raw) if end_raw else None
    if (start_raw and start is None) or (end_raw and end is None):
        return None

    return {
        "raw": raw,
        "kind": "range",
        "precision": None,
        "date": None,
        "season": None,
        "qualifier": None,
        "start": start["date"] if start else None,
        "end": end["date"] if end else None,
    }


def parse_date(value: str) -> Optional[Dict[str, Any]]:
    """
    Parse an FTT date string.

    Returns a dict describing the date (``kind``, ``precision``, ``date``,
    ``season``, ``qualifier`` and, for ranges, ``start``/``end``) or None
    when the string does not conform to the grammar.
    """
    raw = (value or "").strip()
    if not raw:
        return None

    if raw == UNKNOWN:
        return {"raw": raw, "kind": "unknown", "precision": None, "date": None,
                "season": None, "qualifier": None}

    if raw == OPEN:
        return {"raw": raw, "kind": "open", "precision": None, "date": None,
                "season": None, "qualifier": None}

    if raw.startswith("[") and raw.endswith("]"):
        return _parse_range(raw)

    return _parse_single(raw)


def is_valid_date(value: str) -> bool:
    return parse_date(value) is not None
