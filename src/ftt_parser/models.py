"""
Record graph produced by the FTT parser.

Records live in an arena keyed by their NFC-normalized id; every
relationship between records is a string id stored in a field slot and is
resolved by lookup, never by object reference.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ftt_parser.core.diagnostics import Diagnostic


# -----------------------------
# Record identity
# -----------------------------

SOURCE_SIGIL = "^"
EVENT_SIGIL = "&"
PLACEHOLDER_SIGIL = "?"


class RecordType(str, Enum):
    INDIVIDUAL = "INDIVIDUAL"
    SOURCE = "SOURCE"
    EVENT = "EVENT"
    PLACEHOLDER = "PLACEHOLDER"

    @classmethod
    def from_id(cls, record_id: str) -> "RecordType":
        """Derive the record type from the id's leading sigil."""
        if record_id.startswith(SOURCE_SIGIL):
            return cls.SOURCE
        if record_id.startswith(EVENT_SIGIL):
            return cls.EVENT
        if record_id.startswith(PLACEHOLDER_SIGIL):
            return cls.PLACEHOLDER
        return cls.INDIVIDUAL


def is_placeholder(record_id: str) -> bool:
    return record_id.startswith(PLACEHOLDER_SIGIL)


# -----------------------------
# Fields and modifiers
# -----------------------------

@dataclass(slots=True)
class PlaceMetadata:
    """Derived geocoding data hoisted out of a place slot."""
    geo: Optional[str] = None
    coords: Optional[str] = None


@dataclass(slots=True)
class Modifier:
    """A citation / annotation / qualifier bound to the preceding field."""
    raw: str = ""
    parsed: List[str] = field(default_factory=list)
    line: Optional[int] = None


@dataclass(slots=True)
class Field:
    raw: str = ""
    parsed: List[str] = field(default_factory=list)
    modifiers: Dict[str, List[Modifier]] = field(default_factory=dict)
    metadata: Optional[PlaceMetadata] = None
    is_implicit: bool = False
    line: Optional[int] = None

    def slot(self, index: int) -> str:
        """Return the trimmed slot at ``index`` or "" when the author omitted it."""
        if index < len(self.parsed):
            return self.parsed[index].strip()
        return ""

    @property
    def target(self) -> str:
        """Slot 0; the referenced id for relationship fields."""
        return self.slot(0)


@dataclass(slots=True)
class Record:
    id: str
    type: RecordType
    line: Optional[int] = None
    fields: Dict[str, List[Field]] = field(default_factory=dict)

    def get(self, key: str) -> List[Field]:
        return self.fields.get(key, [])

    def add_field(self, key: str, fld: Field) -> Field:
        self.fields.setdefault(key, []).append(fld)
        return fld

    def references(self, key: str, target_id: str) -> bool:
        """True if any ``key`` field on this record names ``target_id``."""
        return any(f.target == target_id for f in self.get(key))

    def iter_fields(self) -> Iterator[Tuple[str, Field]]:
        for key, fields in self.fields.items():
            for fld in fields:
                yield key, fld


# -----------------------------
# Arena
# -----------------------------

class RecordArena:
    """Insertion-ordered identity index of records."""

    def __init__(self) -> None:
        self._records: Dict[str, Record] = {}

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records.values())

    def get(self, record_id: str) -> Optional[Record]:
        return self._records.get(record_id)

    def add(self, record: Record) -> Record:
        if record.id in self._records:
            raise KeyError(f"Record {record.id!r} already exists")
        self._records[record.id] = record
        return record

    def resolves(self, record_id: str) -> bool:
        """Placeholders always resolve; anything else must be defined."""
        return is_placeholder(record_id) or record_id in self._records

    def as_dict(self) -> Dict[str, Record]:
        return dict(self._records)


# -----------------------------
# Session output
# -----------------------------

@dataclass
class ParseResult:
    headers: Dict[str, str] = field(default_factory=dict)
    records: Dict[str, Record] = field(default_factory=dict)
    fatal: List[Diagnostic] = field(default_factory=list)
    errors: List[Diagnostic] = field(default_factory=list)
    warnings: List[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.fatal

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return [*self.fatal, *self.errors, *self.warnings]

    def to_dict(self) -> Dict[str, Any]:
        from ftt_parser.exporter.json_exporter import build_result_dict

        return build_result_dict(self)
