"""
Outcome type threaded through every processing step.

A step returns ``Ok(value)`` to continue or ``Fatal(diagnostic)`` to abort
the session. The driver checks with ``isinstance(outcome, Fatal)`` and
short-circuits; data problems never unwind through exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar, Union

if TYPE_CHECKING:
    from ftt_parser.core.diagnostics import Diagnostic

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Fatal:
    diagnostic: "Diagnostic"


Outcome = Union[Ok[T], Fatal]
