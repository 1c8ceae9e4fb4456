from collections.abc import Generator, Iterator

from lockbox.exceptions import EncryptionError


class ByteStream:
    """Single-consumption, pull-based stream of encrypted output.

    Bytes are produced only as fast as the consumer iterates. The stream is
    complete when iteration ends without error; any failure while producing
    is raised as EncryptionError. close() abandons unfinished work.
    """

    def __init__(self, chunks: Iterator[bytes]) -> None:
        self._chunks = chunks
        self._drain: Generator[bytes, None, None] | None = None
        self._started = False
        self._completed = False
        self._closed = False
        self.bytes_sent = 0

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> Iterator[bytes]:
        if self._started:
            raise RuntimeError("ByteStream can only be consumed once")
        self._started = True
        self._drain = self._iterate()
        return self._drain

    def read(self) -> bytes:
        """Drain the whole stream into memory."""
        return b"".join(self)

    def close(self) -> None:
        """Abort the stream and release the producer."""
        self._started = True
        if self._drain is not None:
            self._drain.close()
        self._release()

    def _iterate(self) -> Generator[bytes, None, None]:
        try:
            for chunk in self._chunks:
                if chunk:
                    self.bytes_sent += len(chunk)
                    yield chunk
        except EncryptionError:
            raise
        except Exception as exc:
            raise EncryptionError(f"output stream aborted: {exc}") from exc
        finally:
            self._release()
        self._completed = True

    def _release(self) -> None:
        if self._closed:
            return
        self._closed = True
        close = getattr(self._chunks, "close", None)
        if close is not None:
            close()
