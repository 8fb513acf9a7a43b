class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class FileReadError(ProcessorError):
    """Raised when an input file cannot be read from disk."""
