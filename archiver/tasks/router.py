from collections.abc import Callable, Mapping
from pathlib import Path, PurePosixPath

from archiver.compute.base import BaseComputeController
from archiver.consolidation.consolidator import DocumentConsolidator
from archiver.consolidation.exceptions import EmptyResultError, InvalidInputError
from archiver.logging.logger import Log
from archiver.ocr.base import BaseOcrClient
from archiver.storage.base import BaseObjectStorage
from archiver.storage.models import StorageItem
from archiver.tasks.exceptions import TaskValidationError
from archiver.tasks.models import TaskResponse, TaskType

MARKDOWN_FILE_NAME = "+page.svelte.md"
PDF_FILE_NAME = "document.pdf"


class TaskRouter:
    """Routes a task event to the matching archive operation.

    This is the only layer that turns exceptions into responses.
    """

    def __init__(
        self,
        *,
        consolidator: DocumentConsolidator,
        ocr_client: BaseOcrClient,
        storage: BaseObjectStorage,
        compute: BaseComputeController,
        content_prefix: str,
        merged_pdf_path: str | Path,
        presigned_url_expires_seconds: int = 300,
    ) -> None:
        self._consolidator = consolidator
        self._ocr_client = ocr_client
        self._storage = storage
        self._compute = compute
        self._prefix = content_prefix
        self._merged_pdf_path = Path(merged_pdf_path)
        self._expires_in = presigned_url_expires_seconds
        self._handlers: dict[TaskType, Callable[[Mapping[str, object]], TaskResponse]] = {
            TaskType.UPDATE: self._update,
            TaskType.CREATE: self._create,
            TaskType.DEPLOY: self._deploy,
            TaskType.DOWNLOAD: self._download,
            TaskType.DOWNLOAD_MARKDOWN: self._download_markdown,
        }

    def handle(self, event: object) -> TaskResponse:
        Log.info("Task handler started")
        try:
            task = self._parse(event)
            task_type = task["type"]
            try:
                handler = self._handlers[TaskType(task_type)]
            except ValueError:
                Log.warning(f"Unknown task type received: {task_type}")
                return TaskResponse.failure(400, f"Unknown task type: {task_type}")
            Log.info(f"Processing '{task_type}' task")
            return handler(task)
        except TaskValidationError as exc:
            Log.warning(f"Rejected task: {exc}")
            return TaskResponse.failure(400, str(exc))
        except (InvalidInputError, EmptyResultError) as exc:
            Log.error(f"Consolidation failed: {exc}")
            return TaskResponse.failure(422, str(exc))
        except Exception:
            Log.exception("Error processing task event")
            return TaskResponse.failure(500, "An error occurred while processing the request.")

    @staticmethod
    def _parse(event: object) -> Mapping[str, object]:
        if not isinstance(event, Mapping):
            raise TaskValidationError(
                f"Invalid payload received. Expected an object, got: {type(event).__name__}"
            )
        if not event.get("type"):
            raise TaskValidationError("Task object missing 'type' property.")
        return event

    @staticmethod
    def _require_title(task: Mapping[str, object]) -> str:
        title = task.get("title")
        if not isinstance(title, str) or not title:
            raise TaskValidationError(f"Missing 'title' for {task['type']} task.")
        return title

    def _markdown_key(self, title: str) -> str:
        return f"{self._prefix}{title}{MARKDOWN_FILE_NAME}"

    def _update(self, task: Mapping[str, object]) -> TaskResponse:
        title = self._require_title(task)
        content = task.get("content")
        if content is None:
            raise TaskValidationError("Missing 'content' for update task.")
        self._storage.put_objects([StorageItem(key=self._markdown_key(title), body=str(content))])
        Log.info(f"Update task completed for {title}")
        return TaskResponse.ok(f"Successfully updated {title}")

    def _create(self, task: Mapping[str, object]) -> TaskResponse:
        files = task.get("files")
        if not isinstance(files, list) or not files:
            raise TaskValidationError("Missing or empty 'files' array for create task.")

        result = self._consolidator.consolidate(files, self._merged_pdf_path)
        pdf_bytes = result.output_path.read_bytes()

        excluded_titles = self._existing_titles()
        ocr_result = self._ocr_client.transcribe(pdf_bytes, excluded_titles)
        title = ocr_result.title.replace("/", "-")

        folder = f"{self._prefix}/{title}"
        self._storage.put_objects(
            [
                StorageItem(key=f"{folder}/{MARKDOWN_FILE_NAME}", body=ocr_result.markdown),
                StorageItem(
                    key=f"{folder}/{PDF_FILE_NAME}",
                    body=pdf_bytes,
                    content_type="application/pdf",
                ),
            ]
        )
        self._compute.start()
        Log.info(f"Create task completed for {title}")
        return TaskResponse.ok(
            f"Successfully created entry for {title}",
            pageCount=result.page_count,
            skippedFiles=[o.file_name for o in result.skipped],
        )

    def _existing_titles(self) -> list[str]:
        folders = self._storage.list_folders(f"{self._prefix}/")
        return [PurePosixPath(folder).name for folder in folders if folder.strip("/")]

    def _deploy(self, task: Mapping[str, object]) -> TaskResponse:
        try:
            self._compute.start()
        except Exception as exc:
            Log.error(f"Failed starting instance: {exc}")
            return TaskResponse.failure(500, "Failed to start instance", error=str(exc))
        return TaskResponse.ok("Successfully initiated start for instance")

    def _download_markdown(self, task: Mapping[str, object]) -> TaskResponse:
        title = self._require_title(task)
        key = self._markdown_key(title)
        Log.info(f"Reading markdown content for key: {key}")
        content = self._storage.read_text(key)
        return TaskResponse.ok("Download URL generated successfully.", downloadUrl=content)

    def _download(self, task: Mapping[str, object]) -> TaskResponse:
        title = self._require_title(task)
        prefix = f"{self._prefix}{title}"
        pdf_keys = self._storage.list_pdf_keys(prefix)
        if not pdf_keys:
            Log.info(f"No PDF files found under prefix {prefix}")
            return TaskResponse.failure(404, "No PDF document found for that title.")
        target_key = pdf_keys[0]
        url = self._storage.presigned_url(target_key, self._expires_in)
        return TaskResponse.ok(
            "Download URL generated successfully.",
            downloadUrl=url,
            fileNameSuggestion=PurePosixPath(target_key).name,
        )
