from dataclasses import dataclass
from enum import Enum

PDF_MIME_TYPE = "application/pdf"
ZIP_MIME_TYPE = "application/zip"


class EncryptionPath(str, Enum):
    PDF = "pdf"
    ARCHIVE = "archive"


@dataclass(frozen=True)
class PdfTarget:
    """A document to re-emit as an encrypted PDF."""

    content: bytes
    filename: str

    path = EncryptionPath.PDF

    @property
    def output_filename(self) -> str:
        return self.filename

    @property
    def content_type(self) -> str:
        return PDF_MIME_TYPE


@dataclass(frozen=True)
class ArchiveTarget:
    """Any other document, wrapped in an encrypted ZIP."""

    content: bytes
    filename: str

    path = EncryptionPath.ARCHIVE

    @property
    def output_filename(self) -> str:
        return f"{self.filename}.zip"

    @property
    def content_type(self) -> str:
        return ZIP_MIME_TYPE


EncryptionTarget = PdfTarget | ArchiveTarget
