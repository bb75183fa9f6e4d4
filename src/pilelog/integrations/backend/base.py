"""
Base interface for the pile log web service.
"""

from abc import ABC, abstractmethod

from pilelog.core.records.models import PendingRecord, SubmissionResult


class BackendError(Exception):
    """Web service could not be reached or returned unusable data."""


class BaseBackend(ABC):
    """Abstract base class for the pile log web service."""

    @abstractmethod
    async def get_piles(self, project_id: int) -> list[str]:
        """
        Get piles awaiting driving.

        Args:
            project_id: Project to list piles for

        Returns:
            Pile numbers in the order the service returns them

        Raises:
            BackendError: On transport failure, non-2xx status or bad JSON
        """
        pass

    @abstractmethod
    async def submit(self, record: PendingRecord) -> SubmissionResult:
        """
        Send a completed record. Never raises for network problems;
        failures are reported through ``SubmissionResult.success``.
        """
        pass

    async def close(self) -> None:
        """Release network resources."""
