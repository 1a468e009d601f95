class PipelineError(Exception):
    """Raised when a pipeline step runs before its input table exists."""
