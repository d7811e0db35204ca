class PipelineError(Exception):
    """Base exception for pipeline failures."""


class ParseExecutionError(PipelineError):
    """Raised when reading or exporting fails unexpectedly."""


class FatalParseError(PipelineError):
    """Raised by the pipeline when a parse ends in a fatal diagnostic."""

    def __init__(self, diagnostic):
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic
