"""
Pipeline exceptions.
"""


class ContextPipelineError(Exception):
    """Raised when the context pipeline itself fails, as opposed to a single data source."""

    def __init__(self, message: str, stage: str):
        super().__init__(message)
        self.stage = stage
