# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
HTTP client with automatic retry logic, timeout handling, and optional session support.

This module provides :class:`~AzureDevOps.Tfvc.core._http._HttpClient`, a wrapper
around the requests library that adds configurable retry behavior for transient
network errors and throttling responses, timeout management based on HTTP method
types, and optional connection pooling via session reuse.
"""

from __future__ import annotations

import random
import time
from typing import Any, Optional

import requests

from ..common.constants import HEADER_RETRY_AFTER
from ._error_codes import TRANSIENT_STATUS_CODES


class _HttpClient:
    """
    HTTP client with configurable retry logic, timeout handling, and optional session support.

    :param retries: Maximum number of attempts for transient errors. Default is 5.
    :type retries: :class:`int` | None
    :param backoff: Base delay in seconds between retry attempts. Default is 0.5.
    :type backoff: :class:`float` | None
    :param timeout: Default request timeout in seconds. If None, uses per-method defaults.
    :type timeout: :class:`float` | None
    :param max_backoff: Upper bound for a single retry delay in seconds. Default is 60.
    :type max_backoff: :class:`float` | None
    :param jitter: Whether to randomize retry delays by +/-25%. Default is True.
    :type jitter: :class:`bool` | None
    :param retry_transient_errors: Whether 429/502/503/504 responses are retried. Default is True.
    :type retry_transient_errors: :class:`bool` | None
    :param session: Optional requests.Session for connection pooling.
    :type session: :class:`requests.Session` | None
    """

    def __init__(
        self,
        retries: Optional[int] = None,
        backoff: Optional[float] = None,
        timeout: Optional[float] = None,
        max_backoff: Optional[float] = None,
        jitter: Optional[bool] = None,
        retry_transient_errors: Optional[bool] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.max_attempts = retries if retries is not None else 5
        self.base_delay = backoff if backoff is not None else 0.5
        self.max_backoff = max_backoff if max_backoff is not None else 60.0
        self.default_timeout: Optional[float] = timeout
        self.jitter = jitter if jitter is not None else True
        self.retry_transient_errors = retry_transient_errors if retry_transient_errors is not None else True
        self._session = session

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Execute an HTTP request with automatic retry logic and timeout management.

        Applies default timeouts based on HTTP method (120s for POST/DELETE, 10s for others),
        retries on network errors and transient HTTP status codes with exponential backoff.
        The last transient response is returned unchanged once attempts are exhausted.

        :param method: HTTP method (GET, POST, OPTIONS, etc.).
        :type method: :class:`str`
        :param url: Target URL for the request.
        :type url: :class:`str`
        :param kwargs: Additional arguments passed to ``requests.request()`` or
            ``session.request()``, including headers, data, params, stream.
        :return: HTTP response object.
        :rtype: :class:`requests.Response`
        :raises requests.exceptions.RequestException: If all retry attempts fail.
        """
        if "timeout" not in kwargs:
            if self.default_timeout is not None:
                kwargs["timeout"] = self.default_timeout
            else:
                m = (method or "").lower()
                kwargs["timeout"] = 120 if m in ("post", "delete") else 10

        attempts = max(1, self.max_attempts)
        for attempt in range(attempts):
            try:
                if self._session is not None:
                    response = self._session.request(method, url, **kwargs)
                else:
                    response = requests.request(method, url, **kwargs)
            except requests.exceptions.RequestException:
                if attempt == attempts - 1:
                    raise
                time.sleep(self._calculate_retry_delay(attempt))
                continue

            if (
                self.retry_transient_errors
                and response.status_code in TRANSIENT_STATUS_CODES
                and attempt < attempts - 1
            ):
                delay = self._calculate_retry_delay(attempt, response)
                # Release the pooled connection held by the discarded response
                response.close()
                time.sleep(delay)
                continue
            return response

        raise RuntimeError("Unexpected end of retry loop")

    def _calculate_retry_delay(self, attempt: int, response: Optional[requests.Response] = None) -> float:
        """
        Compute the delay before the next attempt.

        A valid integer ``Retry-After`` header wins (capped at ``max_backoff``);
        otherwise ``base_delay * 2**attempt`` capped at ``max_backoff``, with
        +/-25% jitter when enabled.

        :param attempt: Zero-based attempt number that just failed.
        :type attempt: :class:`int`
        :param response: Response carrying a possible ``Retry-After`` header.
        :type response: :class:`requests.Response` | None
        :return: Delay in seconds, never negative.
        :rtype: :class:`float`
        """
        if response is not None and HEADER_RETRY_AFTER in (response.headers or {}):
            try:
                retry_after = int(response.headers[HEADER_RETRY_AFTER])
                return min(retry_after, self.max_backoff)
            except (ValueError, TypeError):
                pass

        delay = min(self.base_delay * (2**attempt), self.max_backoff)

        if self.jitter:
            jitter_range = delay * 0.25
            delay = max(0, delay + random.uniform(-jitter_range, jitter_range))

        return delay

    def close(self) -> None:
        """
        Close the HTTP client and release resources.

        If a session was provided, this method closes it. Safe to call multiple times.
        """
        if self._session is not None:
            self._session.close()
            self._session = None
