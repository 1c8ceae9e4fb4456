from collections.abc import Iterator

import pymupdf

from lockbox.encryption.base import BasePdfEncryptor, PermissionPolicy, iter_chunks
from lockbox.exceptions import EncryptionError


def pymupdf_permissions(policy: PermissionPolicy) -> int:
    """Build the PyMuPDF permission bitmask; capabilities not granted stay unset."""
    flags = 0
    if policy.print_lowres:
        flags |= pymupdf.PDF_PERM_PRINT
    if policy.print_lowres and policy.print_highres:
        flags |= pymupdf.PDF_PERM_PRINT_HQ
    if policy.modify:
        flags |= pymupdf.PDF_PERM_MODIFY
    if policy.extract:
        flags |= pymupdf.PDF_PERM_COPY
    if policy.annotate:
        flags |= pymupdf.PDF_PERM_ANNOTATE
    if policy.fill_forms:
        flags |= pymupdf.PDF_PERM_FORM
    if policy.accessibility:
        flags |= pymupdf.PDF_PERM_ACCESSIBILITY
    if policy.assemble:
        flags |= pymupdf.PDF_PERM_ASSEMBLE
    return flags


class PyMuPdfEncryptor(BasePdfEncryptor):
    """Encrypts PDF documents using PyMuPDF (AES-256)."""

    def encrypt(self, pdf_bytes: bytes, password: str) -> Iterator[bytes]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as source:  # type: ignore[no-untyped-call]
                if source.needs_pass:
                    raise EncryptionError("source PDF is already password protected")
                if source.page_count == 0:
                    raise EncryptionError("source PDF has no pages")
                with pymupdf.open() as target:  # type: ignore[no-untyped-call]
                    target.insert_pdf(source)
                    if target.page_count != source.page_count:
                        raise EncryptionError(
                            f"copied {target.page_count} of {source.page_count} pages"
                        )
                    data = target.tobytes(
                        garbage=1,
                        deflate=True,
                        encryption=pymupdf.PDF_ENCRYPT_AES_256,
                        owner_pw=password,
                        user_pw=password,
                        permissions=pymupdf_permissions(self._permissions),
                    )
        except EncryptionError:
            raise
        except Exception as exc:
            raise EncryptionError(f"pymupdf encryption failed: {exc}") from exc
        return iter_chunks(data, self._chunk_size)
