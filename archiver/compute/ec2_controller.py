from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from archiver.compute.base import BaseComputeController
from archiver.compute.exceptions import ComputeError
from archiver.logging.logger import Log


class Ec2Controller(BaseComputeController):
    """Starts one EC2 instance through an injected boto3 EC2 client."""

    def __init__(self, client: Any, instance_id: str) -> None:
        self._client = client
        self._instance_id = instance_id

    def start(self) -> None:
        if not self._instance_id:
            raise ComputeError("No compute instance configured")
        Log.info(f"Attempting to start EC2 instance: {self._instance_id}")
        try:
            response = self._client.start_instances(InstanceIds=[self._instance_id])
        except (BotoCoreError, ClientError) as exc:
            raise ComputeError(f"Failed to start instance {self._instance_id}: {exc}") from exc
        Log.debug(f"StartInstances response: {response}")
        Log.info(f"Sent start command for instance: {self._instance_id}")
