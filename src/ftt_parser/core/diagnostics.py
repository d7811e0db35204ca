"""
Diagnostics and the session error reporter.

Every problem found while parsing is a ``Diagnostic`` tagged with a stable
code. Codes carry a default severity tier:

    FATAL    abort the session; no partial graph is returned
    ERROR    recoverable; accumulated and parsing continues
    WARNING  advisory (consistency / style)

A few codes (INVALID_DATE, INVALID_VOCAB, ID_DUPLICATE) are fatal by default
but may be emitted at ERROR severity for slots that are not strictly
controlled, or when the lenient duplicate policy is active.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from ftt_parser.core.result import Fatal


class Severity(str, Enum):
    FATAL = "FATAL"
    ERROR = "ERROR"
    WARNING = "WARNING"


# ---------------------------------------------------------------------------
# Code table
# ---------------------------------------------------------------------------

# Syntax
SYNTAX_INVALID = "SYNTAX_INVALID"
# Context
CTX_HEADER = "CTX_HEADER"
CTX_ORPHAN = "CTX_ORPHAN"
CTX_MODIFIER = "CTX_MODIFIER"
# Identity
ID_INVALID = "ID_INVALID"
ID_DUPLICATE = "ID_DUPLICATE"
# Header / version
HEADER_MISSING = "HEADER_MISSING"
VERSION_INCOMPATIBLE = "VERSION_INCOMPATIBLE"
# Graph integrity
DANGLING_REF = "DANGLING_REF"
DANGLING_CITATION = "DANGLING_CITATION"
GHOST_CHILD = "GHOST_CHILD"
CIRCULAR_LINEAGE = "CIRCULAR_LINEAGE"
# Vocabulary / temporal
INVALID_VOCAB = "INVALID_VOCAB"
INVALID_DATE = "INVALID_DATE"
# Warnings
DATA_CONSISTENCY = "DATA_CONSISTENCY"
VOCAB_NOTICE = "VOCAB_NOTICE"

DEFAULT_SEVERITY: Dict[str, Severity] = {
    SYNTAX_INVALID: Severity.FATAL,
    CTX_HEADER: Severity.FATAL,
    CTX_ORPHAN: Severity.FATAL,
    CTX_MODIFIER: Severity.FATAL,
    ID_INVALID: Severity.FATAL,
    ID_DUPLICATE: Severity.FATAL,
    HEADER_MISSING: Severity.FATAL,
    VERSION_INCOMPATIBLE: Severity.FATAL,
    DANGLING_REF: Severity.FATAL,
    DANGLING_CITATION: Severity.FATAL,
    GHOST_CHILD: Severity.FATAL,
    CIRCULAR_LINEAGE: Severity.FATAL,
    INVALID_VOCAB: Severity.FATAL,
    INVALID_DATE: Severity.FATAL,
    DATA_CONSISTENCY: Severity.WARNING,
    VOCAB_NOTICE: Severity.WARNING,
}

FATAL_CODES = frozenset(
    code for code, sev in DEFAULT_SEVERITY.items() if sev is Severity.FATAL
)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single parser diagnostic."""

    code: str
    message: str
    line: Optional[int] = None
    severity: Severity = Severity.FATAL
    timestamp: str = field(default_factory=_now)

    @property
    def is_fatal(self) -> bool:
        return self.severity is Severity.FATAL

    def to_dict(self) -> Dict[str, object]:
        return {
            "code": self.code,
            "message": self.message,
            "line": self.line,
            "severity": self.severity.value,
            "timestamp": self.timestamp,
        }

    def __str__(self) -> str:
        where = f"line {self.line}: " if self.line else ""
        return f"[{self.severity.value}] {self.code}: {where}{self.message}"


def make_diagnostic(
    code: str,
    message: str,
    line: Optional[int] = None,
    severity: Optional[Severity] = None,
) -> Diagnostic:
    if code not in DEFAULT_SEVERITY:
        raise KeyError(f"Unknown diagnostic code: {code}")
    return Diagnostic(
        code=code,
        message=message,
        line=line,
        severity=severity or DEFAULT_SEVERITY[code],
    )


class ErrorReporter:
    """
    Owns the session's recoverable error and warning lists.

    ``emit`` classifies a diagnostic: fatal ones are handed back wrapped in
    ``Fatal`` so the caller can short-circuit, everything else is recorded.
    """

    def __init__(self, logger=None):
        self.errors: List[Diagnostic] = []
        self.warnings: List[Diagnostic] = []
        self.log = logger

    def emit(
        self,
        code: str,
        message: str,
        line: Optional[int] = None,
        severity: Optional[Severity] = None,
    ) -> Optional[Fatal]:
        diag = make_diagnostic(code, message, line=line, severity=severity)

        if diag.severity is Severity.FATAL:
            if self.log is not None:
                self.log.error(str(diag))
            return Fatal(diag)

        if diag.severity is Severity.ERROR:
            self.errors.append(diag)
            if self.log is not None:
                self.log.warning(str(diag))
        else:
            self.warnings.append(diag)
            if self.log is not None:
                self.log.debug(str(diag))
        return None
