from collections.abc import Iterator

import pyzipper

from lockbox.encryption.base import DEFAULT_CHUNK_SIZE, iter_chunks
from lockbox.exceptions import EncryptionError

COMPRESSION_LEVEL = 9
AES_KEY_BITS = 256


class _ChunkSink:
    """Write-only file object that hands back what was written since the last drain.

    It has no ``seek``, so the ZIP writer appends data descriptors instead of
    going back to patch local headers.
    """

    def __init__(self) -> None:
        self._pending = bytearray()
        self._position = 0

    def write(self, data: bytes) -> int:
        self._pending += data
        self._position += len(data)
        return len(data)

    def tell(self) -> int:
        return self._position

    def flush(self) -> None:
        pass

    def drain(self) -> bytes:
        data = bytes(self._pending)
        self._pending.clear()
        return data


class ArchiveEncryptor:
    """Wraps a file in a single-entry, AES-encrypted ZIP archive."""

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self._chunk_size = chunk_size

    def encrypt(self, file_bytes: bytes, filename: str, password: str) -> Iterator[bytes]:
        """Return a lazy iterator over the archive bytes.

        Nothing is compressed until the first chunk is requested. The entry is
        fed to the compressor one chunk at a time and whatever the archive
        writer emits is handed on before the next slice is read, so closing
        the iterator abandons the remaining work.

        Raises:
            EncryptionError: during iteration, if compression or encryption fails.
        """
        return self._produce(file_bytes, filename, password)

    def _produce(self, file_bytes: bytes, filename: str, password: str) -> Iterator[bytes]:
        sink = _ChunkSink()
        try:
            with pyzipper.AESZipFile(
                sink,
                "w",
                compression=pyzipper.ZIP_DEFLATED,
                compresslevel=COMPRESSION_LEVEL,
                encryption=pyzipper.WZ_AES,
            ) as archive:
                archive.setpassword(password.encode("utf-8"))
                archive.setencryption(pyzipper.WZ_AES, nbits=AES_KEY_BITS)
                with archive.open(filename, "w") as entry:
                    for piece in iter_chunks(file_bytes, self._chunk_size):
                        entry.write(piece)
                        yield from iter_chunks(sink.drain(), self._chunk_size)
        except Exception as exc:
            raise EncryptionError(f"archive encryption failed: {exc}") from exc
        # data descriptor and central directory
        yield from iter_chunks(sink.drain(), self._chunk_size)
