"""Format header and version compatibility."""

from __future__ import annotations

import re
from typing import Dict, Optional, Tuple

from ftt_parser.core import diagnostics as codes
from ftt_parser.core.diagnostics import ErrorReporter
from ftt_parser.core.result import Fatal
from ftt_parser.schema import FORMAT_HEADER

VERSION_TOKEN = re.compile(r"v(\d+)(?:\.(\d+))?\b")


def parse_version(text: str) -> Optional[Tuple[int, int]]:
    """
    Extract ``(major, minor)`` from the first ``vMAJOR.MINOR`` token.

        "FTT v0.1"  -> (0, 1)
        "FTT v2"    -> (2, 0)
        "FTTv0.1"   -> (0, 1)
        "FTT"       -> None
    """
    m = VERSION_TOKEN.search(text or "")
    if not m:
        return None
    return int(m.group(1)), int(m.group(2) or 0)


def check_format_header(
    headers: Dict[str, str],
    supported: str,
    reporter: ErrorReporter,
) -> Optional[Fatal]:
    declared = headers.get(FORMAT_HEADER)
    if not declared:
        return reporter.emit(codes.HEADER_MISSING, f"Missing Header: {FORMAT_HEADER}.")

    version = parse_version(declared)
    limit = parse_version("v" + supported)

    if version is None:
        return reporter.emit(
            codes.VERSION_INCOMPATIBLE,
            f'{FORMAT_HEADER} "{declared}" does not declare a vMAJOR.MINOR version.',
        )

    if limit is not None and version > limit:
        return reporter.emit(
            codes.VERSION_INCOMPATIBLE,
            f"Version Error: File (v{version[0]}.{version[1]}) > Supported (v{supported}).",
        )
    return None
