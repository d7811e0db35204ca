"""Date-slot grammar checks."""

from __future__ import annotations

from typing import Dict, Optional

from ftt_parser.core import diagnostics as codes
from ftt_parser.core.diagnostics import ErrorReporter, Severity
from ftt_parser.core.result import Fatal
from ftt_parser.dates import is_valid_date
from ftt_parser.models import RecordArena
from ftt_parser.schema import DATE_HEADER, DATE_SLOTS


def check_dates(
    arena: RecordArena,
    headers: Dict[str, str],
    reporter: ErrorReporter,
) -> Optional[Fatal]:
    """
    Every non-empty date slot must follow the EDTF-like grammar (fatal).

    HEAD_DATE is checked too, but a bad file date does not invalidate the
    record graph, so it is only a recoverable error.
    """
    head_date = headers.get(DATE_HEADER)
    if head_date and not is_valid_date(head_date):
        reporter.emit(
            codes.INVALID_DATE,
            f'Invalid {DATE_HEADER}: "{head_date}"',
            severity=Severity.ERROR,
        )

    for record in arena:
        for key, slots in DATE_SLOTS.items():
            for fld in record.get(key):
                for idx in slots:
                    value = fld.slot(idx)
                    if value and not is_valid_date(value):
                        return reporter.emit(
                            codes.INVALID_DATE,
                            f'Invalid Date "{value}" in {record.id} ({key}).',
                            fld.line,
                        )
    return None
