from lockbox.encryption.archive_encryptor import ArchiveEncryptor
from lockbox.encryption.base import BasePdfEncryptor
from lockbox.encryption.factory import PdfEncryptorFactory
from lockbox.encryption.router import EncryptionRouter
from lockbox.encryption.targets import ArchiveTarget, EncryptionPath, PdfTarget

__all__ = [
    "ArchiveEncryptor",
    "ArchiveTarget",
    "BasePdfEncryptor",
    "EncryptionPath",
    "EncryptionRouter",
    "PdfEncryptorFactory",
    "PdfTarget",
]
