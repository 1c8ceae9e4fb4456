from lockbox.encryption.targets import (
    PDF_MIME_TYPE,
    ArchiveTarget,
    EncryptionPath,
    EncryptionTarget,
    PdfTarget,
)
from lockbox.files.models import UploadedFile


class EncryptionRouter:
    """Chooses the encryption strategy from the declared MIME type only."""

    def classify(self, mime_type: str) -> EncryptionPath:
        if mime_type.lower() == PDF_MIME_TYPE:
            return EncryptionPath.PDF
        return EncryptionPath.ARCHIVE

    def route(self, file: UploadedFile) -> EncryptionTarget:
        if self.classify(file.mime_type) is EncryptionPath.PDF:
            return PdfTarget(content=file.content, filename=file.filename)
        return ArchiveTarget(content=file.content, filename=file.filename)
