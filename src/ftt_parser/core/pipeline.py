from __future__ import annotations

from ftt_parser.core.context import ParseContext
from ftt_parser.core.exceptions import FatalParseError, ParseExecutionError
from ftt_parser.exporter import export_result_to_json
from ftt_parser.parser_core import FTTParser


class Pipeline:
    """
    Orchestrates parse -> export.
    No parsing logic lives here.
    """

    def __init__(self, context: ParseContext):
        self.ctx = context
        self.log = context.logger

    def run(self):
        self.log.info("Pipeline starting")

        try:
            parser = FTTParser(config=self.ctx.config)
            result = parser.parse_file(self.ctx.input_path)
        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise ParseExecutionError(str(exc)) from exc

        self.ctx.result = result
        self.ctx.stats = {
            "records": len(result.records),
            "fatal": len(result.fatal),
            "errors": len(result.errors),
            "warnings": len(result.warnings),
        }

        if result.fatal and self.ctx.fail_on_fatal:
            raise FatalParseError(result.fatal[0])

        if self.ctx.output_path:
            try:
                export_result_to_json(
                    result, self.ctx.output_path, indent=self.ctx.indent
                )
            except OSError as exc:
                self.log.exception("Export failed")
                raise ParseExecutionError(str(exc)) from exc

        self.log.info(f"Pipeline completed: {self.ctx.stats}")
        return result
