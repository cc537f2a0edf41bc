from abc import ABC, abstractmethod


class BaseComputeController(ABC):
    """Contract for starting the machine that rebuilds the published site."""

    @abstractmethod
    def start(self) -> None:
        """Request the instance to start. Returns once the request is accepted."""
