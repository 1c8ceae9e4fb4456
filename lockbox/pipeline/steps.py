from lockbox.encryption.archive_encryptor import ArchiveEncryptor
from lockbox.encryption.base import BasePdfEncryptor
from lockbox.encryption.router import EncryptionRouter
from lockbox.encryption.targets import PdfTarget
from lockbox.logging.logger import Log
from lockbox.passwords.provisioner import PasswordProvisioner
from lockbox.pipeline.pipeline import PipelineContext, PipelineStep
from lockbox.pipeline.streams import ByteStream
from lockbox.validation.validator import ContentValidator


class ValidateContentStep(PipelineStep):
    def __init__(self, validator: ContentValidator) -> None:
        self._validator = validator

    def run(self, context: PipelineContext) -> PipelineContext:
        file = context.request.file
        report = self._validator.validate(file)
        context.report = report
        if not report.ok:
            Log.warning(
                f"Rejected {file.filename}",
                rules=",".join(report.rules()),
                mime_type=file.mime_type,
                size=file.size,
            )
        report.raise_for_violations()
        return context


class ResolvePasswordStep(PipelineStep):
    def __init__(self, provisioner: PasswordProvisioner) -> None:
        self._provisioner = provisioner

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.report is None or not context.report.ok:
            raise ValueError("PipelineContext.report must pass before password resolution")
        supplied = context.request.password
        context.password = self._provisioner.resolve(supplied)
        Log.debug(
            "Password resolved",
            source="caller" if supplied is not None else "generated",
        )
        return context


class RouteStep(PipelineStep):
    def __init__(self, router: EncryptionRouter) -> None:
        self._router = router

    def run(self, context: PipelineContext) -> PipelineContext:
        context.target = self._router.route(context.request.file)
        Log.debug(
            f"Routed {context.target.filename} to {context.target.path.value} encryption"
        )
        return context


class EncryptStep(PipelineStep):
    def __init__(
        self,
        pdf_encryptor: BasePdfEncryptor,
        archive_encryptor: ArchiveEncryptor,
    ) -> None:
        self._pdf_encryptor = pdf_encryptor
        self._archive_encryptor = archive_encryptor

    def run(self, context: PipelineContext) -> PipelineContext:
        target = context.target
        if target is None:
            raise ValueError("PipelineContext.target must be set before encryption")
        if not context.password:
            raise ValueError("PipelineContext.password must be set before encryption")
        if isinstance(target, PdfTarget):
            chunks = self._pdf_encryptor.encrypt(target.content, context.password)
        else:
            chunks = self._archive_encryptor.encrypt(
                target.content, target.filename, context.password
            )
        context.stream = ByteStream(chunks)
        return context
