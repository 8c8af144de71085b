"""HTTP implementation of CatalogSource.

One GET to the products endpoint, returning the JSON array it serves.
Transient network failures are retried with exponential backoff; a
non-2xx response, exhausted retries, or an undecodable body end the load.
"""

from __future__ import annotations

from typing import Any

import requests
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from catview.domain.exceptions import DecodeError, LoadError
from catview.domain.repository.catalog_source import CatalogSource
from catview.infrastructure.logger import get_logger

logger = get_logger(__name__)

USER_AGENT = "catview/0.1 (+https://github.com/catview)"

# Only failures where trying again can help.
_RETRYABLE = (requests.ConnectionError, requests.Timeout)


class HttpCatalogSource(CatalogSource):

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        attempts: int = 3,
        session: requests.Session | None = None,
        max_wait: float = 10.0,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._attempts = max(1, attempts)
        self._max_wait = max_wait
        self._session = session if session is not None else requests.Session()
        self._session.headers.update({"User-Agent": USER_AGENT})

    @property
    def url(self) -> str:
        return self._url

    # --- CatalogSource interface ----------------------------------------------

    def fetch_records(self) -> list[Any]:
        response = self._get()

        try:
            data = response.json()
        except (ValueError, RecursionError) as exc:
            raise DecodeError(f"Response from {self._url} is not valid JSON") from exc

        if not isinstance(data, list):
            raise DecodeError(
                f"Expected a JSON array from {self._url}, got {type(data).__name__}"
            )

        logger.info("Fetched %d records from %s", len(data), self._url)
        return data

    # --- HTTP helpers ---------------------------------------------------------

    def _get(self) -> requests.Response:
        retrying = Retrying(
            retry=retry_if_exception_type(_RETRYABLE),
            wait=wait_exponential_jitter(initial=1, max=self._max_wait),
            stop=stop_after_attempt(self._attempts),
            before_sleep=self._log_retry,
            reraise=True,
        )
        try:
            response = retrying(self._session.get, self._url, timeout=self._timeout)
            response.raise_for_status()
            if not 200 <= response.status_code < 300:
                raise LoadError(
                    f"Catalog request failed with HTTP {response.status_code}"
                )
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else "?"
            raise LoadError(f"Catalog request failed with HTTP {status}") from exc
        except requests.RequestException as exc:
            raise LoadError(f"Could not reach {self._url}: {exc}") from exc
        return response

    def _log_retry(self, retry_state) -> None:
        logger.warning(
            "Request to %s failed (attempt %d/%d): %s",
            self._url,
            retry_state.attempt_number,
            self._attempts,
            retry_state.outcome.exception(),
        )
