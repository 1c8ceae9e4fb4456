from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedFile:
    """A single uploaded document as handed over by the boundary layer."""

    content: bytes
    filename: str
    mime_type: str

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def extension(self) -> str:
        """Lowercased suffix from the last dot, including the dot; '' if none."""
        index = self.filename.rfind(".")
        if index < 0:
            return ""
        return self.filename[index:].lower()

    def __repr__(self) -> str:
        return (
            f"UploadedFile(filename={self.filename!r}, mime_type={self.mime_type!r}, "
            f"size={self.size})"
        )
