from lockbox.delivery.response import (
    GENERIC_CLIENT_MESSAGE,
    GENERIC_SERVER_MESSAGE,
    PASSWORD_HEADER,
    attachment_headers,
    content_disposition,
    error_response,
)
from lockbox.exceptions import EncryptionError, LockboxError, PasswordPolicyError, ValidationError
from lockbox.pipeline.models import EncryptionResult
from lockbox.pipeline.streams import ByteStream
from lockbox.validation.validator import Violation


def _violation() -> Violation:
    return Violation(
        rule="extension",
        field_name="file",
        filename="a.exe",
        value=".exe",
        message="File a.exe in field file has unsupported extension (.exe)",
    )


class TestAttachmentHeaders:
    def test_sets_type_disposition_and_password(self) -> None:
        result = EncryptionResult(
            stream=ByteStream(iter([])),
            password="Valid1Pass!",
            filename="data.csv.zip",
            content_type="application/zip",
        )

        headers = attachment_headers(result)

        assert headers == {
            "Content-Type": "application/zip",
            "Content-Disposition": 'attachment; filename="data.csv.zip"',
            PASSWORD_HEADER: "Valid1Pass!",
        }

    def test_escapes_quotes(self) -> None:
        assert content_disposition('my "best" file.pdf') == (
            'attachment; filename="my \\"best\\" file.pdf"'
        )

    def test_non_ascii_adds_encoded_filename(self) -> None:
        value = content_disposition("résumé.pdf")
        assert value.startswith('attachment; filename="r?sum?.pdf"')
        assert "filename*=UTF-8''r%C3%A9sum%C3%A9.pdf" in value


class TestErrorResponse:
    def test_validation_error_detailed(self) -> None:
        response = error_response(ValidationError([_violation()]), expose_details=True)
        assert response.status_code == 400
        assert "unsupported extension" in response.message

    def test_validation_error_hidden(self) -> None:
        response = error_response(ValidationError([_violation()]), expose_details=False)
        assert response.status_code == 400
        assert response.message == GENERIC_CLIENT_MESSAGE

    def test_password_policy_error_is_client_error(self) -> None:
        response = error_response(PasswordPolicyError(["missing a digit"]), expose_details=True)
        assert response.status_code == 400
        assert "missing a digit" in response.message

    def test_encryption_error_detailed(self) -> None:
        response = error_response(EncryptionError("corrupt xref"), expose_details=True)
        assert response.status_code == 500
        assert response.message == "corrupt xref"

    def test_encryption_error_hidden(self) -> None:
        response = error_response(EncryptionError("corrupt xref"), expose_details=False)
        assert response.status_code == 500
        assert response.message == GENERIC_SERVER_MESSAGE

    def test_unknown_lockbox_error_is_generic(self) -> None:
        response = error_response(LockboxError("???"), expose_details=True)
        assert response.status_code == 500
        assert response.message == GENERIC_SERVER_MESSAGE
