"""
Key vocabulary of the FamilyTree-Text format.

Slot positions are zero-based indices into ``Field.parsed``:

    NAME:       display | sort | type | status
    BORN/DIED:  date | place
    PARENT:     id | relationship type
    CHILD:      id
    UNION:      id | type | start | end | end reason
    ASSOC:      id | role | start | end
    EVENT:      type | start | end | place | details
    EVENT_REF:  &event id | role
    SRC:        ^source id | page
    MEDIA:      path | date | caption
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Optional, Tuple

HEADER_PREFIX = "HEAD_"
ID_KEY = "ID"
EXTENSION_PREFIX = "_"

FORMAT_HEADER = "HEAD_FORMAT"
DATE_HEADER = "HEAD_DATE"

# Modifier suffixes: citation, annotation, qualifier.
CITATION_SUFFIX = "_SRC"
MODIFIER_SUFFIXES: Tuple[str, ...] = (CITATION_SUFFIX, "_NOTE", "_QUAL")

FIELD_KEYS: FrozenSet[str] = frozenset(
    {
        "NAME",
        "SEX",
        "BORN",
        "DIED",
        "PARENT",
        "CHILD",
        "UNION",
        "ASSOC",
        "EVENT",
        "EVENT_REF",
        "NOTES",
        "SRC",
        "MEDIA",
        "TITLE",
        "AUTHOR",
        "PLACE",
        "TYPE",
        "START_DATE",
        "END_DATE",
    }
)

PARENT_KEY = "PARENT"
CHILD_KEY = "CHILD"
UNION_KEY = "UNION"
BORN_KEY = "BORN"

# Fields whose slot 0 names another record.
REFERENCE_KEYS: Tuple[str, ...] = ("PARENT", "CHILD", "UNION", "ASSOC", "SRC", "EVENT_REF")

# Slots holding dates.
DATE_SLOTS: Dict[str, Tuple[int, ...]] = {
    "BORN": (0,),
    "DIED": (0,),
    "EVENT": (1, 2),
    "UNION": (2, 3),
    "ASSOC": (2, 3),
    "MEDIA": (1,),
    "START_DATE": (0,),
    "END_DATE": (0,),
}

# Slot holding a place string.
PLACE_SLOTS: Dict[str, int] = {
    "BORN": 1,
    "DIED": 1,
    "EVENT": 3,
    "PLACE": 0,
}

# UNION slots compared between reciprocal partners: type, start, end, reason.
UNION_METADATA_SLOTS: Tuple[int, ...] = (1, 2, 3, 4)


def is_header_key(key: str) -> bool:
    return key.startswith(HEADER_PREFIX)


def is_extension_key(key: str) -> bool:
    return key.startswith(EXTENSION_PREFIX)


def is_field_key(key: str) -> bool:
    return key in FIELD_KEYS or is_extension_key(key)


def modifier_base(key: str) -> Optional[str]:
    """
    Return the base key a modifier binds to, or None for non-modifier keys.

        "BORN_SRC"  -> "BORN"
        "EVENT_QUAL" -> "EVENT"
        "NOTES"     -> None
    """
    for suffix in MODIFIER_SUFFIXES:
        if key.endswith(suffix) and len(key) > len(suffix):
            return key[: -len(suffix)]
    return None


def is_citation(modifier_key: str) -> bool:
    return modifier_key.endswith(CITATION_SUFFIX)
