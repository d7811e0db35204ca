from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ParseContext:
    """
    Shared pipeline context.
    Carries the run's inputs in and its result and counters out.
    """

    config: Any
    logger: Any

    input_path: Optional[str] = None
    output_path: Optional[str] = None

    # Raise FatalParseError instead of exporting a failed parse
    fail_on_fatal: bool = False
    indent: int = 2

    result: Any = None
    stats: Dict[str, int] = field(default_factory=dict)

    debug: bool = False
