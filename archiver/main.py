import json
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any

import boto3

from archiver.compute.ec2_controller import Ec2Controller
from archiver.config.settings import Settings
from archiver.consolidation.consolidator import build_consolidator
from archiver.logging.logger import Log
from archiver.ocr.factory import OcrClientFactory
from archiver.storage.s3_storage import S3ObjectStorage
from archiver.tasks.models import TaskResponse
from archiver.tasks.router import TaskRouter


def build_router(
    settings: Settings,
    *,
    s3_client: Any | None = None,
    ec2_client: Any | None = None,
) -> TaskRouter:
    """Build a TaskRouter with all collaborators constructed once."""
    if s3_client is None:
        s3_client = boto3.client("s3", region_name=settings.aws_region)
    if ec2_client is None:
        ec2_client = boto3.client("ec2", region_name=settings.aws_region)
    return TaskRouter(
        consolidator=build_consolidator(),
        ocr_client=OcrClientFactory.create(settings),
        storage=S3ObjectStorage(s3_client, settings.bucket_name),
        compute=Ec2Controller(ec2_client, settings.compute_instance_id),
        content_prefix=settings.content_prefix,
        merged_pdf_path=settings.merged_pdf_path,
        presigned_url_expires_seconds=settings.presigned_url_expires_seconds,
    )


@lru_cache(maxsize=1)
def _runtime_router() -> TaskRouter | None:
    settings = Settings()
    Log.configure(settings.log_level)
    if not settings.bucket_name:
        Log.error("BUCKET_NAME environment variable is not set")
        return None
    return build_router(settings)


def lambda_handler(event: Any, context: Any = None) -> dict[str, object]:
    """Serverless entry point: event in, ``{"statusCode", "body"}`` out."""
    _ = context
    router = _runtime_router()
    if router is None:
        response = TaskResponse.failure(500, "Server configuration error: Bucket name missing.")
    else:
        response = router.handle(event)
    return response.to_dict()


def main(argv: list[str] | None = None) -> int:
    """Run one task event read from a JSON file argument or stdin."""
    args = sys.argv[1:] if argv is None else argv
    raw = Path(args[0]).read_text(encoding="utf-8") if args else sys.stdin.read()
    try:
        event = json.loads(raw)
    except json.JSONDecodeError as exc:
        print(f"Invalid event JSON: {exc}", file=sys.stderr)
        return 2
    result = lambda_handler(event)
    print(json.dumps(result, indent=2))
    return 0 if result["statusCode"] == 200 else 1


if __name__ == "__main__":
    sys.exit(main())
