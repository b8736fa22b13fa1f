"""HTTP implementation of ScoringOracleClient."""

import asyncio
from typing import Any, Dict

import httpx
import structlog

from src.core.config import settings
from src.core.metrics import (
    track_oracle_fetch_latency,
    record_oracle_fetch_success,
    record_oracle_fetch_failure,
)
from src.domain.entities.reputation import MAX_SCORE, MIN_SCORE
from src.domain.exceptions import OracleUnavailableException
from src.domain.interfaces import ScoringOracleClient

logger = structlog.get_logger(__name__)


class HttpScoringOracleClient(ScoringOracleClient):
    """
    HTTP client for the reputation contract read gateway.

    Reads the current score with retry logic for transient failures.
    Client errors (4xx) and malformed payloads are not retried.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
    ):
        self._base_url = (base_url or settings.scoring_oracle_url).rstrip("/")
        self._timeout = timeout or settings.scoring_oracle_timeout
        self._max_retries = max_retries or settings.scoring_oracle_max_retries

    async def fetch_score(self, wallet: str) -> int:
        """
        Fetch the current on-chain score for a wallet.

        Implements retry logic with exponential backoff.
        """
        url = f"{self._base_url}/reputation/{wallet}"

        last_exception = None

        for attempt in range(self._max_retries):
            try:
                with track_oracle_fetch_latency():
                    async with httpx.AsyncClient(timeout=self._timeout) as client:
                        response = await client.get(url)

                if 400 <= response.status_code < 500:
                    record_oracle_fetch_failure("error")
                    raise OracleUnavailableException(
                        message=f"Scoring oracle rejected request: {response.status_code}",
                        wallet=wallet,
                    )

                if response.status_code >= 500:
                    record_oracle_fetch_failure("error")
                    last_exception = OracleUnavailableException(
                        message=f"Scoring oracle error: {response.status_code}",
                        wallet=wallet,
                    )
                    logger.warning(
                        "oracle_server_error",
                        wallet=wallet,
                        status_code=response.status_code,
                        attempt=attempt + 1,
                        max_retries=self._max_retries,
                    )
                else:
                    score = self._parse_score(response, wallet)
                    record_oracle_fetch_success()
                    return score

            except httpx.TimeoutException:
                record_oracle_fetch_failure("timeout")
                last_exception = OracleUnavailableException(
                    message="Scoring oracle request timed out",
                    wallet=wallet,
                )
                logger.warning(
                    "oracle_timeout",
                    wallet=wallet,
                    attempt=attempt + 1,
                    max_retries=self._max_retries,
                )
            except OracleUnavailableException:
                raise
            except httpx.HTTPError as e:
                record_oracle_fetch_failure("error")
                last_exception = OracleUnavailableException(
                    message=f"Scoring oracle unreachable: {str(e)}",
                    wallet=wallet,
                )
                logger.error(
                    "oracle_transport_error",
                    wallet=wallet,
                    attempt=attempt + 1,
                    error=str(e),
                )

            # Exponential backoff
            if attempt < self._max_retries - 1:
                await asyncio.sleep(2**attempt * 0.1)

        raise last_exception or OracleUnavailableException(
            "Failed to fetch reputation score", wallet=wallet
        )

    def _parse_score(self, response: httpx.Response, wallet: str) -> int:
        """Extract and bounds-check the score from the oracle payload."""
        try:
            data: Dict[str, Any] = response.json()
        except ValueError:
            data = {}

        score = data.get("score") if isinstance(data, dict) else None

        if not isinstance(score, int) or isinstance(score, bool):
            record_oracle_fetch_failure("invalid_response")
            raise OracleUnavailableException(
                message="Scoring oracle returned a malformed score",
                wallet=wallet,
            )

        if not MIN_SCORE <= score <= MAX_SCORE:
            record_oracle_fetch_failure("invalid_response")
            raise OracleUnavailableException(
                message=f"Scoring oracle returned out-of-range score: {score}",
                wallet=wallet,
            )

        return score
