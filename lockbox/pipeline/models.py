from dataclasses import dataclass

from lockbox.files.models import UploadedFile
from lockbox.pipeline.streams import ByteStream


@dataclass(frozen=True)
class EncryptionRequest:
    file: UploadedFile
    password: str | None = None


@dataclass
class EncryptionResult:
    """Encrypted output handed to the boundary layer, which must drain or close the stream."""

    stream: ByteStream
    password: str
    filename: str
    content_type: str

    def __repr__(self) -> str:
        return (
            f"EncryptionResult(filename={self.filename!r}, "
            f"content_type={self.content_type!r}, password='***')"
        )
