class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class SubmissionValidationError(ProcessorError):
    """Raised when a submitted idea does not meet the input requirements."""


class EvaluationNotFoundError(ProcessorError):
    """Raised when a stored evaluation cannot be found in the database."""
