import io

import pikepdf
import pytest

from lockbox.encryption.base import PermissionPolicy
from lockbox.encryption.pikepdf_encryptor import PikePdfEncryptor, pikepdf_permissions
from lockbox.exceptions import EncryptionError

PASSWORD = "Valid1Pass!"


def _encrypt(pdf_bytes: bytes) -> bytes:
    return b"".join(PikePdfEncryptor().encrypt(pdf_bytes, PASSWORD))


class TestPikePdfEncryptor:
    def test_output_requires_password(self, sample_pdf_bytes: bytes) -> None:
        data = _encrypt(sample_pdf_bytes)

        with pytest.raises(pikepdf.PasswordError):
            pikepdf.open(io.BytesIO(data))
        with pikepdf.open(io.BytesIO(data), password=PASSWORD) as pdf:
            assert pdf.is_encrypted
            assert len(pdf.pages) == 1

    def test_preserves_page_count(self, multi_page_pdf_bytes: bytes) -> None:
        data = _encrypt(multi_page_pdf_bytes)
        with pikepdf.open(io.BytesIO(data), password=PASSWORD) as pdf:
            assert len(pdf.pages) == 3

    def test_raises_on_malformed_pdf(self) -> None:
        with pytest.raises(EncryptionError):
            PikePdfEncryptor().encrypt(b"not a pdf at all", PASSWORD)

    def test_raises_on_already_encrypted_pdf(self, sample_pdf_bytes: bytes) -> None:
        with pytest.raises(EncryptionError, match="already password protected"):
            PikePdfEncryptor().encrypt(_encrypt(sample_pdf_bytes), "Other1Pass!")

    def test_output_denies_printing(self, sample_pdf_bytes: bytes) -> None:
        data = _encrypt(sample_pdf_bytes)
        with pikepdf.open(io.BytesIO(data), password=PASSWORD) as pdf:
            assert pdf.allow.print_lowres is False
            assert pdf.allow.print_highres is False
            assert pdf.allow.extract is False
            assert pdf.allow.modify_other is False

    def test_granted_capability_reaches_output(self, sample_pdf_bytes: bytes) -> None:
        encryptor = PikePdfEncryptor(permissions=PermissionPolicy(extract=True))
        data = b"".join(encryptor.encrypt(sample_pdf_bytes, PASSWORD))
        with pikepdf.open(io.BytesIO(data), password=PASSWORD) as pdf:
            assert pdf.allow.extract is True
            assert pdf.allow.print_lowres is False


class TestPikePdfPermissions:
    def test_default_policy_denies_everything(self) -> None:
        allow = pikepdf_permissions(PermissionPolicy())
        assert not any(
            [
                allow.print_lowres,
                allow.print_highres,
                allow.extract,
                allow.modify_other,
                allow.modify_annotation,
                allow.modify_form,
                allow.modify_assembly,
                allow.accessibility,
            ]
        )

    def test_high_resolution_print_needs_low_resolution_print(self) -> None:
        assert pikepdf_permissions(PermissionPolicy(print_highres=True)).print_highres is False
        allow = pikepdf_permissions(PermissionPolicy(print_lowres=True, print_highres=True))
        assert allow.print_highres is True
