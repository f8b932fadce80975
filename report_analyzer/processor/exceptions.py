class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class ReportNotFoundError(ProcessorError):
    """Raised when a report cannot be found in storage."""


class UnsupportedFileTypeError(ProcessorError):
    """Raised when an uploaded file is neither a PDF nor an image."""


class FileReadError(ProcessorError):
    """Raised when a file cannot be read from disk."""
