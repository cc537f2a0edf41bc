import json
from dataclasses import dataclass, field
from enum import Enum


class TaskType(str, Enum):
    UPDATE = "update"
    CREATE = "create"
    DEPLOY = "deploy"
    DOWNLOAD = "download"
    DOWNLOAD_MARKDOWN = "downloadMD"


@dataclass(frozen=True)
class TaskResponse:
    """HTTP-style reply returned to the caller of the task entry point."""

    status_code: int
    body: dict[str, object] = field(default_factory=dict)

    @classmethod
    def ok(cls, message: str, **extra: object) -> "TaskResponse":
        return cls(200, {"message": message, **extra})

    @classmethod
    def failure(cls, status_code: int, message: str, **extra: object) -> "TaskResponse":
        return cls(status_code, {"message": message, **extra})

    def to_dict(self) -> dict[str, object]:
        return {"statusCode": self.status_code, "body": json.dumps(self.body)}
