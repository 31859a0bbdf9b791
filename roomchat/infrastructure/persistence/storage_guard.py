"""
Storage call policy shared by the Prisma repositories.

- Every call is bounded by Config.STORAGE_TIMEOUT_SECONDS.
- Prisma failures, including transport errors between the client and its
  query engine, surface as domain StorageError / StorageTimeoutError.
- Constraint violations pass through untouched so repositories can map
  them to domain errors.
- Idempotent reads may be wrapped in `read_retry`: one more attempt after a
  short pause, never for timeouts. Writes are never wrapped.
"""

import asyncio
import logging
from typing import Awaitable, TypeVar

import httpx
from prisma import errors as prisma_errors
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    retry_if_not_exception_type,
    stop_after_attempt,
)

from roomchat.config.settings import Config
from roomchat.domain.exceptions import StorageError, StorageTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Handled by repositories, never wrapped into StorageError
CONSTRAINT_ERRORS = (
    prisma_errors.UniqueViolationError,
    prisma_errors.ForeignKeyViolationError,
    prisma_errors.RecordNotFoundError,
)


def _read_retry_wait(retry_state) -> float:
    # Read per attempt so config overrides apply without re-importing
    return Config.STORAGE_READ_RETRY_WAIT_SECONDS


read_retry = retry(
    retry=retry_if_exception_type(StorageError)
    & retry_if_not_exception_type(StorageTimeoutError),
    stop=stop_after_attempt(2),
    wait=_read_retry_wait,
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)


async def guarded(awaitable: Awaitable[T], operation: str) -> T:
    """Await a Prisma call under the storage deadline and map its failures."""
    try:
        return await asyncio.wait_for(
            awaitable, timeout=Config.STORAGE_TIMEOUT_SECONDS
        )
    except (asyncio.TimeoutError, httpx.TimeoutException) as e:
        logger.warning(
            f"[storage] {operation} timed out after {Config.STORAGE_TIMEOUT_SECONDS}s"
        )
        raise StorageTimeoutError(f"{operation} timed out") from e
    except CONSTRAINT_ERRORS:
        raise
    except prisma_errors.PrismaError as e:
        logger.error(f"[storage] {operation} failed: {e}")
        raise StorageError(f"{operation} failed") from e
    except httpx.TransportError as e:
        # Query engine unreachable or dropped the connection
        logger.error(f"[storage] {operation} lost the query engine: {e}")
        raise StorageError(f"{operation} failed") from e
