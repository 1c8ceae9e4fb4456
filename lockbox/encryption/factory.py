from lockbox.config.settings import Settings
from lockbox.encryption.base import BasePdfEncryptor
from lockbox.encryption.pikepdf_encryptor import PikePdfEncryptor
from lockbox.encryption.pymupdf_encryptor import PyMuPdfEncryptor


class PdfEncryptorFactory:
    """Creates the correct PDF encryptor based on settings."""

    ADAPTERS: dict[str, type[BasePdfEncryptor]] = {
        "pymupdf": PyMuPdfEncryptor,
        "pikepdf": PikePdfEncryptor,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfEncryptor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls(chunk_size=settings.stream_chunk_size)
