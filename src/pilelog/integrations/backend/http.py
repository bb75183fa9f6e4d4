"""
HTTP client for the pile log web service.
Uses aiohttp, the same client library aiogram runs on.
"""

import asyncio
import json
import logging
from typing import Optional

import aiohttp

from pilelog.config import settings
from pilelog.core.records.models import PendingRecord, SubmissionResult
from pilelog.integrations.backend.base import BackendError, BaseBackend

logger = logging.getLogger(__name__)


class HttpBackend(BaseBackend):
    """Pile log web service over HTTP."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        verify_ssl: bool | None = None,
    ):
        self.base_url = (base_url or settings.backend_url).rstrip("/")
        self.timeout = aiohttp.ClientTimeout(
            total=timeout if timeout is not None else settings.backend_timeout
        )
        self.verify_ssl = (
            verify_ssl if verify_ssl is not None else settings.backend_verify_ssl
        )
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def piles_url(self) -> str:
        return f"{self.base_url}/getpilestodriving"

    @property
    def records_url(self) -> str:
        return f"{self.base_url}/"

    def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the shared client session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                connector=aiohttp.TCPConnector(ssl=self.verify_ssl),
            )
        return self._session

    async def get_piles(self, project_id: int) -> list[str]:
        """Get piles awaiting driving."""
        session = self._get_session()
        try:
            async with session.get(
                self.piles_url, params={"project_id": str(project_id)}
            ) as resp:
                if resp.status // 100 != 2:
                    raise BackendError(
                        f"Pile list request failed: {resp.status} {resp.reason}"
                    )
                body = await resp.text()
                if not body.strip():
                    raise BackendError("Pile list response is empty")
                piles = json.loads(body)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise BackendError(f"Pile list request failed: {e!r}") from e
        except ValueError as e:
            raise BackendError(f"Pile list is not valid JSON: {e}") from e

        if piles is None:
            return []

        if not isinstance(piles, list) or not all(isinstance(p, str) for p in piles):
            raise BackendError("Pile list must be a JSON array of strings")

        logger.debug(f"Got {len(piles)} piles for project {project_id}")
        return piles

    async def submit(self, record: PendingRecord) -> SubmissionResult:
        """Send a completed record."""
        session = self._get_session()
        payload = record.to_payload()
        try:
            async with session.post(self.records_url, json=payload) as resp:
                if resp.status == 200:
                    logger.info(
                        f"Record for pile {record.pile_number} accepted by web service"
                    )
                    return SubmissionResult(
                        success=True,
                        server_message=f"{resp.status} {resp.reason}",
                        status_code=resp.status,
                    )

                logger.warning(
                    f"Web service rejected pile {record.pile_number}: "
                    f"{resp.status} {resp.reason}"
                )
                return SubmissionResult(
                    success=False,
                    server_message=f"{resp.status} {resp.reason}",
                    status_code=resp.status,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Failed to send pile {record.pile_number}: {e!r}")
            return SubmissionResult(success=False, server_message=str(e) or repr(e))

    async def close(self) -> None:
        """Close the client session."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
