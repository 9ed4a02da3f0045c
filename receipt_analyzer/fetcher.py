#!/usr/bin/env python3
"""
Receipt Fetcher
Downloads the raw receipt JSON from the receipt endpoint with a single GET.
No retries: any transport failure ends the run.
"""

import logging
from typing import Optional

import requests

from .config import RECEIPT_URL, REQUEST_TIMEOUT
from .errors import ErrorKind, Result

logger = logging.getLogger(__name__)


class ReceiptFetcher:
    """Fetch receipt details from a configurable URL"""

    def __init__(self, url: str = RECEIPT_URL, timeout: Optional[float] = REQUEST_TIMEOUT):
        """
        Args:
            url: Receipt endpoint returning a JSON array
            timeout: Request timeout in seconds (None waits indefinitely)
        """
        self.url = url
        self.timeout = timeout

    def fetch(self) -> Result[str]:
        """
        Fetch the receipt body as text

        Returns:
            Result with the body, or a TRANSPORT / EMPTY_BODY failure
        """
        logger.info(f"Fetching receipt details from {self.url}")
        try:
            resp = requests.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
            body = resp.text
        except requests.exceptions.RequestException as e:
            logger.error(f"Receipt request failed: {e}")
            return Result.failure(ErrorKind.TRANSPORT, str(e))

        if not body:
            logger.warning(f"Receipt endpoint returned an empty body (status {resp.status_code})")
            return Result.failure(ErrorKind.EMPTY_BODY)

        logger.debug(f"Received {len(body)} characters")
        return Result.success(body)
