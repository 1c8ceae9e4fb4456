import argparse
import mimetypes
import sys
from pathlib import Path

from lockbox.config.settings import Settings
from lockbox.delivery.response import error_response
from lockbox.exceptions import LockboxError
from lockbox.files.models import UploadedFile
from lockbox.logging.logger import Log
from lockbox.pipeline.models import EncryptionRequest, EncryptionResult
from lockbox.pipeline.service import build_lockbox_service

FALLBACK_MIME_TYPE = "application/octet-stream"


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lockbox",
        description="Encrypt a document with a password.",
    )
    parser.add_argument("file", type=Path, help="document to encrypt")
    parser.add_argument("--password", default=None, help="password to use (generated if omitted)")
    parser.add_argument("--mime-type", default=None, help="declared MIME type (guessed if omitted)")
    parser.add_argument(
        "--output-dir", type=Path, default=Path("locked"), help="where to write the result"
    )
    return parser.parse_args(argv)


def _write_stream(result: EncryptionResult, destination: Path) -> None:
    """Drain the result stream to destination, removing the file on failure."""
    try:
        with destination.open("wb") as fh:
            for chunk in result.stream:
                fh.write(chunk)
    except BaseException:
        result.stream.close()
        destination.unlink(missing_ok=True)
        raise


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build service -> lock file -> write output."""
    settings = Settings()
    Log.configure(settings.log_level)
    args = _parse_args(argv)

    source: Path = args.file
    mime_type = args.mime_type or mimetypes.guess_type(source.name)[0] or FALLBACK_MIME_TYPE
    try:
        size = source.stat().st_size
        if size > settings.max_file_size:
            Log.error(
                f"Refusing to read {source}: file is too large",
                size=size,
                max_file_size=settings.max_file_size,
            )
            return 1
        content = source.read_bytes()
    except OSError as exc:
        Log.error(f"Cannot read {source}: {exc.strerror or exc}")
        return 1

    upload = UploadedFile(content=content, filename=source.name, mime_type=mime_type)
    service = build_lockbox_service(settings)

    try:
        result = service.lock(EncryptionRequest(file=upload, password=args.password))
        args.output_dir.mkdir(parents=True, exist_ok=True)
        destination = args.output_dir / result.filename
        if destination.resolve() == source.resolve():
            result.stream.close()
            Log.error(f"Refusing to overwrite input file {source}")
            return 1
        _write_stream(result, destination)
    except LockboxError as exc:
        response = error_response(exc, settings.expose_error_details)
        Log.error(response.message, status=response.status_code)
        return 1

    Log.info(f"Wrote {destination}", bytes=result.stream.bytes_sent)
    print(result.password)
    return 0


if __name__ == "__main__":
    sys.exit(main())
