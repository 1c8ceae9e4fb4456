from abc import ABC, abstractmethod
from dataclasses import dataclass

from lockbox.encryption.targets import EncryptionTarget
from lockbox.pipeline.models import EncryptionRequest
from lockbox.pipeline.streams import ByteStream
from lockbox.validation.validator import ValidationReport


@dataclass(slots=True)
class PipelineContext:
    request: EncryptionRequest
    report: ValidationReport | None = None
    password: str = ""
    target: EncryptionTarget | None = None
    stream: ByteStream | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
