"""Typed exceptions for configuration, content acquisition and rendering."""


class PdfPipeError(Exception):
    """Base class for all errors raised by :mod:`pdfpipe`."""


class ConfigError(PdfPipeError, ValueError):
    """Raised when configuration files or option values are invalid."""


class ContentReadError(PdfPipeError):
    """Raised when text content cannot be read from standard input."""


class UnsupportedFontError(PdfPipeError, ValueError):
    """Raised when a font name cannot be resolved by the PDF backend."""

    def __init__(self, font: str) -> None:
        super().__init__(f"unsupported font: {font}")
        self.font = font


class OutputWriteError(PdfPipeError, OSError):
    """Raised when the finished PDF cannot be written to disk."""
