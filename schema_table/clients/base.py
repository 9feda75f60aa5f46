# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Base client for service clients."""

import abc
import time
from typing import Any

from loguru import logger

from schema_table.config import Settings


class BaseClient(abc.ABC):
    """Base client for service clients."""

    def __init__(self, settings: Settings):
        """Initialize base client."""
        self.settings = settings

    @abc.abstractmethod
    async def initialize(self) -> None:
        """Initialize client."""
        pass

    @abc.abstractmethod
    async def cleanup(self) -> None:
        """Clean up client."""
        pass

    async def __aenter__(self) -> 'BaseClient':
        """Initialize the client on entering the context."""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Clean up the client on leaving the context."""
        await self.cleanup()

    def monitor_operation(self, operation_name: str) -> 'OperationMonitor':
        """Context manager for monitoring operations."""
        return OperationMonitor(self, operation_name)

    def _get_client_name(self) -> str:
        """Get client name for logging."""
        return self.__class__.__name__.replace('Client', '').lower()


class OperationMonitor:
    """Context manager that logs the outcome and duration of an operation.

    Exceptions are logged and left to propagate.
    """

    def __init__(self, client: BaseClient, operation_name: str) -> None:
        """Initialize operation monitor."""
        self.client = client
        self.operation_name = operation_name
        self.start_time: float | None = None
        self.client_name = client._get_client_name()

    def __enter__(self) -> 'OperationMonitor':
        """Enter context manager."""
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit context manager."""
        duration = time.time() - self.start_time if self.start_time is not None else 0.0

        context = {
            'client': self.client_name,
            'operation': self.operation_name,
            'duration': duration,
        }

        bound = logger.bind(**context)
        if exc_type:
            bound.error(f'Operation {self.operation_name} failed: {exc_val}')
        else:
            bound.debug(f'Operation {self.operation_name} completed in {duration:.3f}s')
