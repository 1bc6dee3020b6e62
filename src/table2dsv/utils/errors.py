"""Typed exceptions for source classification, rendering and output formats."""


class SourceError(ValueError):
    """Base class for input source classification errors."""


class MissingArgumentError(SourceError):
    """Raised when no input source was given."""


class UnrecognizedInputError(SourceError):
    """Raised when the input is neither a URL, an HTML file path nor a table fragment."""


class RenderError(RuntimeError):
    """Raised when the rendering engine cannot be started or used."""


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no writer is registered for a file format."""
