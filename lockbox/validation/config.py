from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

DEFAULT_MAX_FILE_SIZE = int(3.5 * 1024 * 1024)

DEFAULT_ALLOWED_FILE_TYPES: tuple[str, ...] = (
    "image/jpeg",
    "image/jpg",
    "image/png",
    "application/pdf",
    "text/csv",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
)

DEFAULT_ALLOWED_FILE_EXTENSIONS: tuple[str, ...] = (
    ".jpg",
    ".jpeg",
    ".png",
    ".pdf",
    ".csv",
    ".docx",
)

# Leading bytes per declared MIME type. Types without an entry (e.g. CSV)
# are not signature-checked.
DEFAULT_SIGNATURES: Mapping[str, bytes] = MappingProxyType(
    {
        "image/jpeg": b"\xff\xd8\xff",
        "image/jpg": b"\xff\xd8\xff",
        "image/png": b"\x89PNG",
        "application/pdf": b"%PDF",
        # DOCX is a ZIP container
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document": b"PK\x03\x04",
    }
)


@dataclass(frozen=True)
class ValidationConfig:
    """Read-only upload policy shared by every request."""

    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    min_file_size: int = 1
    allowed_file_types: frozenset[str] = frozenset(DEFAULT_ALLOWED_FILE_TYPES)
    allowed_file_extensions: frozenset[str] = frozenset(DEFAULT_ALLOWED_FILE_EXTENSIONS)
    signatures: Mapping[str, bytes] = field(default_factory=lambda: DEFAULT_SIGNATURES)

    def signature_for(self, mime_type: str) -> bytes | None:
        return self.signatures.get(mime_type)
