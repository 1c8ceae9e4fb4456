import io
from collections.abc import Iterator

import pikepdf

from lockbox.encryption.base import BasePdfEncryptor, PermissionPolicy, iter_chunks
from lockbox.exceptions import EncryptionError


def pikepdf_permissions(policy: PermissionPolicy) -> pikepdf.Permissions:
    """Translate the permission policy into pikepdf permissions."""
    return pikepdf.Permissions(
        print_lowres=policy.print_lowres,
        print_highres=policy.print_lowres and policy.print_highres,
        modify_other=policy.modify,
        extract=policy.extract,
        modify_annotation=policy.annotate,
        modify_form=policy.fill_forms,
        accessibility=policy.accessibility,
        modify_assembly=policy.assemble,
    )


class PikePdfEncryptor(BasePdfEncryptor):
    """Encrypts PDF documents using pikepdf/qpdf (AES-256, R6)."""

    def encrypt(self, pdf_bytes: bytes, password: str) -> Iterator[bytes]:
        out = io.BytesIO()
        try:
            with pikepdf.open(io.BytesIO(pdf_bytes)) as source, pikepdf.new() as target:
                if len(source.pages) == 0:
                    raise EncryptionError("source PDF has no pages")
                target.pages.extend(source.pages)
                if len(target.pages) != len(source.pages):
                    raise EncryptionError(
                        f"copied {len(target.pages)} of {len(source.pages)} pages"
                    )
                target.save(
                    out,
                    encryption=pikepdf.Encryption(
                        user=password,
                        owner=password,
                        R=6,
                        allow=pikepdf_permissions(self._permissions),
                    ),
                )
        except EncryptionError:
            raise
        except pikepdf.PasswordError as exc:
            raise EncryptionError("source PDF is already password protected") from exc
        except Exception as exc:
            raise EncryptionError(f"pikepdf encryption failed: {exc}") from exc
        return iter_chunks(out.getvalue(), self._chunk_size)
