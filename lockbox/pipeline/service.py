from lockbox.config.settings import Settings
from lockbox.encryption.archive_encryptor import ArchiveEncryptor
from lockbox.encryption.factory import PdfEncryptorFactory
from lockbox.encryption.router import EncryptionRouter
from lockbox.exceptions import LockboxError
from lockbox.logging.logger import Log
from lockbox.passwords.provisioner import PasswordProvisioner
from lockbox.pipeline.models import EncryptionRequest, EncryptionResult
from lockbox.pipeline.pipeline import PipelineContext, PipelineStep
from lockbox.pipeline.steps import (
    EncryptStep,
    ResolvePasswordStep,
    RouteStep,
    ValidateContentStep,
)
from lockbox.validation.validator import ContentValidator


class LockboxService:
    """Runs the lock pipeline: validate -> resolve password -> route -> encrypt."""

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def lock(self, request: EncryptionRequest) -> EncryptionResult:
        """Encrypt one uploaded file.

        Raises:
            ValidationError: if the file fails any content check.
            PasswordPolicyError: if the supplied password is too weak.
            EncryptionError: if the document cannot be encrypted.
        """
        file = request.file
        Log.info(f"Locking {file.filename}", mime_type=file.mime_type, size=file.size)
        context = PipelineContext(request=request)
        try:
            for step in self._steps:
                context = step.run(context)
        except LockboxError as exc:
            Log.warning(f"Locking {file.filename} failed: {type(exc).__name__}")
            raise

        if context.target is None or context.stream is None:
            raise RuntimeError("pipeline finished without producing an output stream")
        Log.info(
            f"Locked {file.filename}",
            output=context.target.output_filename,
            path=context.target.path.value,
        )
        return EncryptionResult(
            stream=context.stream,
            password=context.password,
            filename=context.target.output_filename,
            content_type=context.target.content_type,
        )


def build_lockbox_service(settings: Settings) -> LockboxService:
    """Build a LockboxService with all required adapters."""
    validator = ContentValidator(settings.validation_config())
    provisioner = PasswordProvisioner()
    router = EncryptionRouter()
    pdf_encryptor = PdfEncryptorFactory.create(settings)
    archive_encryptor = ArchiveEncryptor(chunk_size=settings.stream_chunk_size)
    return LockboxService(
        steps=[
            ValidateContentStep(validator),
            ResolvePasswordStep(provisioner),
            RouteStep(router),
            EncryptStep(
                pdf_encryptor=pdf_encryptor,
                archive_encryptor=archive_encryptor,
            ),
        ]
    )
