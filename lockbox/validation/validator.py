"""Content-authenticity gate for uploaded files.

Extension and declared MIME type are caller-controlled, so the byte-signature
check is what actually ties a file to its claimed type. Every rule is
evaluated and all violations are reported together.
"""

from dataclasses import dataclass, field

from lockbox.exceptions import ValidationError
from lockbox.files.models import UploadedFile
from lockbox.validation.config import ValidationConfig

RULE_EXTENSION = "extension"
RULE_MIME_TYPE = "mime_type"
RULE_EMPTY = "empty"
RULE_TOO_SMALL = "too_small"
RULE_TOO_LARGE = "too_large"
RULE_SIGNATURE = "signature"

_MB = 1024 * 1024


@dataclass(frozen=True)
class Violation:
    """One failed validation rule."""

    rule: str
    field_name: str
    filename: str
    value: str
    message: str


@dataclass(frozen=True)
class ValidationReport:
    filename: str
    violations: tuple[Violation, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.violations

    def rules(self) -> list[str]:
        return [v.rule for v in self.violations]

    def raise_for_violations(self) -> None:
        if self.violations:
            raise ValidationError(list(self.violations))


class ContentValidator:
    """Checks one uploaded file against the upload policy."""

    def __init__(self, config: ValidationConfig) -> None:
        self._config = config

    def validate(self, file: UploadedFile, field_name: str = "file") -> ValidationReport:
        violations = [
            *self._check_extension(file, field_name),
            *self._check_mime_type(file, field_name),
            *self._check_size(file, field_name),
            *self._check_signature(file, field_name),
        ]
        return ValidationReport(filename=file.filename, violations=tuple(violations))

    def _check_extension(self, file: UploadedFile, field_name: str) -> list[Violation]:
        extension = file.extension
        if extension in self._config.allowed_file_extensions:
            return []
        return [
            Violation(
                rule=RULE_EXTENSION,
                field_name=field_name,
                filename=file.filename,
                value=extension,
                message=(
                    f"File {file.filename} in field {field_name} has unsupported "
                    f"extension ({extension or 'none'}). Allowed extensions: "
                    f"{self._allowed_extensions()}"
                ),
            )
        ]

    def _check_mime_type(self, file: UploadedFile, field_name: str) -> list[Violation]:
        if file.mime_type.lower() in self._config.allowed_file_types:
            return []
        return [
            Violation(
                rule=RULE_MIME_TYPE,
                field_name=field_name,
                filename=file.filename,
                value=file.mime_type,
                message=(
                    f"File {file.filename} in field {field_name} has unsupported "
                    f"format ({file.mime_type}). Allowed formats: "
                    f"{self._allowed_extensions()}"
                ),
            )
        ]

    def _check_size(self, file: UploadedFile, field_name: str) -> list[Violation]:
        size = file.size
        if size == 0:
            return [
                Violation(
                    rule=RULE_EMPTY,
                    field_name=field_name,
                    filename=file.filename,
                    value="0",
                    message=f"File {file.filename} in field {field_name} is empty",
                )
            ]
        if size < self._config.min_file_size:
            return [
                Violation(
                    rule=RULE_TOO_SMALL,
                    field_name=field_name,
                    filename=file.filename,
                    value=str(size),
                    message=(
                        f"File {file.filename} in field {field_name} is too small "
                        f"({size} bytes). Minimum size: {self._config.min_file_size} bytes"
                    ),
                )
            ]
        if size > self._config.max_file_size:
            return [
                Violation(
                    rule=RULE_TOO_LARGE,
                    field_name=field_name,
                    filename=file.filename,
                    value=str(size),
                    message=(
                        f"File {file.filename} in field {field_name} is too large "
                        f"({size / _MB:.2f}MB). Maximum size: "
                        f"{self._config.max_file_size / _MB:.2f}MB"
                    ),
                )
            ]
        return []

    def _check_signature(self, file: UploadedFile, field_name: str) -> list[Violation]:
        signature = self._config.signature_for(file.mime_type.lower())
        if signature is None:
            return []
        leading = file.content[: len(signature)]
        if leading == signature:
            return []
        return [
            Violation(
                rule=RULE_SIGNATURE,
                field_name=field_name,
                filename=file.filename,
                value=leading.hex(),
                message=(
                    f"File {file.filename} in field {field_name} failed magic number "
                    f"validation. File content does not match declared type "
                    f"({file.mime_type})."
                ),
            )
        ]

    def _allowed_extensions(self) -> str:
        return ", ".join(sorted(self._config.allowed_file_extensions))
