from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass

DEFAULT_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class PermissionPolicy:
    """Capabilities granted to a reader who only knows the user password.

    Everything is denied unless switched on; printing in particular is denied.
    """

    print_lowres: bool = False
    print_highres: bool = False
    modify: bool = False
    extract: bool = False
    annotate: bool = False
    fill_forms: bool = False
    accessibility: bool = False
    assemble: bool = False


DEFAULT_PERMISSIONS = PermissionPolicy()


def iter_chunks(data: bytes, chunk_size: int) -> Iterator[bytes]:
    """Yield data in slices of at most chunk_size bytes."""
    view = memoryview(data)
    for offset in range(0, len(view), chunk_size):
        yield bytes(view[offset : offset + chunk_size])


class BasePdfEncryptor(ABC):
    """Contract for all PDF encryption adapters."""

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        permissions: PermissionPolicy = DEFAULT_PERMISSIONS,
    ) -> None:
        self._chunk_size = chunk_size
        self._permissions = permissions

    @abstractmethod
    def encrypt(self, pdf_bytes: bytes, password: str) -> Iterator[bytes]:
        """Copy every page into a new password-protected document.

        The same password is used as user and owner password. Parsing and
        encryption happen before the first chunk is returned.

        Args:
            pdf_bytes: Raw PDF file content.
            password: Password for the security handler.

        Returns:
            Iterator over the encrypted document bytes.

        Raises:
            EncryptionError: if the source cannot be parsed or copied.
        """
