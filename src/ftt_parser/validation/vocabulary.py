"""
Controlled vocabulary checks.

Three tiers:

* strict slots (PARENT type, UNION type / end reason, NAME status): an
  unknown code is fatal;
* SEX: an unknown code is a recoverable error;
* advisory slots (NAME type, ASSOC role, EVENT type): a non-standard code
  is a VOCAB_NOTICE warning.

Extension codes starting with '_' are never flagged in advisory slots.
"""

from __future__ import annotations

from typing import FrozenSet, NamedTuple, Optional, Tuple

from ftt_parser.core import diagnostics as codes
from ftt_parser.core.diagnostics import ErrorReporter, Severity
from ftt_parser.core.result import Fatal
from ftt_parser.models import RecordArena
from ftt_parser.schema import is_extension_key

PARENT_TYPES = frozenset({"BIO", "ADO", "STE", "FOS", "UNK"})
UNION_TYPES = frozenset({"MARR", "PART", "UNK"})
UNION_REASONS = frozenset({"DIV", "SEP", "WID", "ANN"})
NAME_TYPES = frozenset({"BIRTH", "MARR", "AKA", "NICK", "PROF", "REL", "UNK"})
NAME_STATUS = frozenset({"PREF"})
SEX_CODES = frozenset({"M", "F", "U", "X"})

ASSOC_ROLES = frozenset(
    {
        # Religious
        "GODP", "GODC", "SPON", "OFFI",
        # Legal
        "WITN", "EXEC", "GUAR", "WARD", "INFO",
        # Social
        "MAST", "APPR", "SERV", "NEIG", "ENSL", "OWNR",
    }
)

EVENT_TYPES = frozenset(
    {
        "BAP", "BUR", "CREM", "CONF", "CENS", "PROB", "WILL", "NAT",
        "IMM", "EMIG", "EDUC", "OCC", "RET", "RESI", "GRAD", "MIL",
    }
)


class VocabRule(NamedTuple):
    key: str
    slot: int
    label: str
    allowed: FrozenSet[str]
    severity: Severity


RULES: Tuple[VocabRule, ...] = (
    VocabRule("PARENT", 1, "PARENT Type", PARENT_TYPES, Severity.FATAL),
    VocabRule("UNION", 1, "UNION Type", UNION_TYPES, Severity.FATAL),
    VocabRule("UNION", 4, "UNION Reason", UNION_REASONS, Severity.FATAL),
    VocabRule("NAME", 3, "NAME Status", NAME_STATUS, Severity.FATAL),
    VocabRule("SEX", 0, "SEX Code", SEX_CODES, Severity.ERROR),
    VocabRule("NAME", 2, "NAME Type", NAME_TYPES, Severity.WARNING),
    VocabRule("ASSOC", 1, "ASSOC Role", ASSOC_ROLES, Severity.WARNING),
    VocabRule("EVENT", 0, "EVENT Type", EVENT_TYPES, Severity.WARNING),
)


def check_vocabulary(arena: RecordArena, reporter: ErrorReporter) -> Optional[Fatal]:
    for record in arena:
        for rule in RULES:
            for fld in record.get(rule.key):
                code = fld.slot(rule.slot)
                if not code or code in rule.allowed:
                    continue

                if rule.severity is Severity.WARNING:
                    if is_extension_key(code):
                        continue
                    reporter.emit(
                        codes.VOCAB_NOTICE,
                        f'Vocabulary Notice: Non-standard {rule.label} "{code}" in record {record.id}.',
                        fld.line,
                    )
                    continue

                fatal = reporter.emit(
                    codes.INVALID_VOCAB,
                    f'Vocabulary Error: Invalid {rule.label} "{code}" in record {record.id}.',
                    fld.line,
                    rule.severity,
                )
                if fatal is not None:
                    return fatal
    return None
