"""Custom exceptions for DOCX to PDF conversion."""

from typing import Optional


class DocxToPdfError(Exception):
    """Base exception for conversion errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ArchiveOpenError(DocxToPdfError):
    """Exception raised when the input archive is missing or not a ZIP file."""

    pass


class MissingContentPart(DocxToPdfError):
    """Exception raised when the archive has no word/document.xml entry."""

    pass


class MalformedMarkup(DocxToPdfError):
    """Exception raised when the main content part cannot be parsed."""

    pass


class AssetExtractionError(DocxToPdfError):
    """Exception raised when a media entry cannot be read or persisted."""

    pass


class RenderWriteError(DocxToPdfError):
    """Exception raised when the PDF cannot be produced or written."""

    pass
