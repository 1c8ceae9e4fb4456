from unittest.mock import patch

import pytest

from lockbox.encryption.factory import PdfEncryptorFactory
from lockbox.encryption.pikepdf_encryptor import PikePdfEncryptor
from lockbox.encryption.pymupdf_encryptor import PyMuPdfEncryptor


def _make_settings(pdf_engine: str, stream_chunk_size: int = 65536):  # type: ignore[no-untyped-def]
    """Create a minimal Settings-like object with only the encryptor fields."""
    with patch("lockbox.config.settings.Settings") as mock_cls:
        settings = mock_cls.return_value
        settings.pdf_engine = pdf_engine
        settings.stream_chunk_size = stream_chunk_size
        return settings


class TestPdfEncryptorFactory:
    def test_creates_pymupdf_encryptor(self) -> None:
        encryptor = PdfEncryptorFactory.create(_make_settings("pymupdf"))
        assert isinstance(encryptor, PyMuPdfEncryptor)

    def test_creates_pikepdf_encryptor(self) -> None:
        encryptor = PdfEncryptorFactory.create(_make_settings("pikepdf"))
        assert isinstance(encryptor, PikePdfEncryptor)

    def test_is_case_insensitive(self) -> None:
        encryptor = PdfEncryptorFactory.create(_make_settings("PyMuPDF"))
        assert isinstance(encryptor, PyMuPdfEncryptor)

    def test_passes_chunk_size(self, sample_pdf_bytes: bytes) -> None:
        encryptor = PdfEncryptorFactory.create(_make_settings("pymupdf", stream_chunk_size=256))
        chunks = list(encryptor.encrypt(sample_pdf_bytes, "Valid1Pass!"))
        assert max(len(chunk) for chunk in chunks) <= 256

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            PdfEncryptorFactory.create(_make_settings("unknown"))
