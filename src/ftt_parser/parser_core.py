"""
parser_core.py
Central parsing engine with full logging integration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

from ftt_parser.config import get_config
from ftt_parser.core.diagnostics import Diagnostic, ErrorReporter
from ftt_parser.core.result import Fatal
from ftt_parser.loader.accumulator import Accumulator, flush
from ftt_parser.loader.builder import BuildContext, advance
from ftt_parser.loader.line_source import iter_lines, read_source
from ftt_parser.loader.tokenizer import classify_line
from ftt_parser.logger import get_logger
from ftt_parser.models import ParseResult, RecordArena
from ftt_parser.postprocess import run_postprocess
from ftt_parser.validation import validate_graph


class ParseSession:
    """
    State of a single parse: headers, record arena and reporter.

    A session is used once. It is created by FTTParser.parse() and nothing
    in it outlives the call.
    """

    def __init__(self, *, supported_version: str, duplicate_policy: str, logger):
        self.supported_version = supported_version
        self.log = logger

        self.headers: Dict[str, str] = {}
        self.arena = RecordArena()
        self.reporter = ErrorReporter(logger)
        self.stats: Dict[str, Dict[str, int]] = {}

        self.ctx = BuildContext(
            arena=self.arena,
            headers=self.headers,
            reporter=self.reporter,
            duplicate_policy=duplicate_policy,
        )

    # ---------------------------------------------------------
    # Phases
    # ---------------------------------------------------------
    def _read_lines(self, text: str) -> Optional[Fatal]:
        acc = Accumulator()
        count = 0

        for line, lineno in iter_lines(text):
            outcome = advance(self.ctx, acc, classify_line(line, lineno))
            if isinstance(outcome, Fatal):
                return outcome
            acc = outcome.value
            count += 1

        flush(acc, self.headers)
        self.log.debug(f"Processed {count} lines into {len(self.arena)} records")
        return None

    def _abort(self, fatal: Fatal) -> ParseResult:
        diag: Diagnostic = fatal.diagnostic
        self.log.info(f"Parse aborted by {diag.code}; returning headers only")
        return ParseResult(headers=dict(self.headers), fatal=[diag])

    def run(self, text: str) -> ParseResult:
        fatal = self._read_lines(text)
        if fatal is not None:
            return self._abort(fatal)

        self.stats = run_postprocess(self.arena, self.reporter)
        self.log.debug(f"Post-processing: {self.stats}")

        fatal = validate_graph(
            self.arena, self.headers, self.reporter, self.supported_version
        )
        if fatal is not None:
            return self._abort(fatal)

        return ParseResult(
            headers=dict(self.headers),
            records=self.arena.as_dict(),
            errors=list(self.reporter.errors),
            warnings=list(self.reporter.warnings),
        )


class FTTParser:
    """
    High-level parser:
      - classifies lines and builds records
      - runs post-processing (unions, children, places)
      - validates the graph
      - returns a ParseResult
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("parser_core")

        self.supported_version = self.cfg.supported_version
        self.duplicate_policy = self.cfg.duplicate_ids

        self.log.debug(
            f"Parser engine initialized (supported v{self.supported_version}, "
            f"duplicate ids: {self.duplicate_policy})."
        )

    def new_session(self) -> ParseSession:
        return ParseSession(
            supported_version=self.supported_version,
            duplicate_policy=self.duplicate_policy,
            logger=self.log,
        )

    def parse(self, text: str) -> ParseResult:
        """Parse an in-memory FTT document."""
        result = self.new_session().run(text)
        self.log.info(
            f"Parsed {len(result.records)} records "
            f"({len(result.fatal)} fatal, {len(result.errors)} errors, "
            f"{len(result.warnings)} warnings)"
        )
        return result

    def parse_file(self, path: Union[str, Path]) -> ParseResult:
        """Load and parse an FTT file."""
        self.log.info(f"Parsing FTT input: {path}")
        return self.parse(read_source(path))


def parse(text: str, config=None) -> ParseResult:
    """Convenience wrapper: ``FTTParser(config).parse(text)``."""
    return FTTParser(config=config).parse(text)
