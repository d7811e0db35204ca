"""
Main entry for the FTT parser.

This module is intentionally thin:
- argument parsing
- configuration setup
- pipeline orchestration

No parsing logic lives here.
"""

from __future__ import annotations

import argparse
import sys

from ftt_parser.config import get_config
from ftt_parser.logger import get_logger, set_debug

from ftt_parser.core.context import ParseContext
from ftt_parser.core.exceptions import FatalParseError
from ftt_parser.core.pipeline import Pipeline
from ftt_parser.utils import outputs_path

log = get_logger("main")


# ---------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------
def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parse an FTT genealogy file and export it as JSON"
    )
    parser.add_argument(
        "-i",
        "--input",
        required=True,
        help="Path to .ftt input file",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Final output JSON path (default: <outputs_dir>/export.json)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 instead of exporting a fatal parse",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    return parser


# ---------------------------------------------------------
# Pipeline Runner
# ---------------------------------------------------------
def run(input_path: str, output_path, debug_flag: bool, strict: bool = False):
    """
    Prepare context and execute the parsing pipeline.
    """

    cfg = get_config()
    output_path = output_path or str(outputs_path("export.json"))
    cfg.debug = bool(debug_flag)
    if cfg.debug:
        set_debug(True)

    log.info(f"Loading FTT: {input_path}")

    ctx = ParseContext(
        config=cfg,
        logger=log,
        input_path=input_path,
        output_path=output_path,
        fail_on_fatal=strict,
        debug=cfg.debug,
    )

    result = Pipeline(ctx).run()

    log.info(f"Main pipeline complete. Output: {output_path}")
    return result


# ---------------------------------------------------------
# Program Entry Point
# ---------------------------------------------------------
def main(argv=None) -> int:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    try:
        run(
            input_path=args.input,
            output_path=args.output,
            debug_flag=args.debug,
            strict=args.strict,
        )
    except FatalParseError as exc:
        log.error(f"Fatal parse error: {exc}")
        return 1
    except Exception as exc:
        log.exception(f"Unhandled exception in main: {exc}")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
