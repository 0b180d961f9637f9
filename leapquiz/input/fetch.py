"""Fetching the word-list page."""

import requests
from tenacity import RetryError, retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from leapquiz.common.errors import SourceUnavailable


# Module-level session for connection reuse
_session = requests.Session()
_session.headers.update({
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
})


class _RetryableStatus(Exception):
    """Non-200 response that is worth retrying."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP error! status: {status_code}")


def _get_once(url: str, timeout: float) -> str:
    resp = _session.get(url, timeout=timeout)
    if resp.status_code == 404:
        # Permanent, don't retry
        raise SourceUnavailable(f"HTTP error! status: {resp.status_code}")
    if resp.status_code != 200:
        raise _RetryableStatus(resp.status_code)
    if not resp.encoding or resp.encoding.lower() == "iso-8859-1":
        resp.encoding = resp.apparent_encoding
    return resp.text


def fetch_html(url: str, timeout: float = 20.0, max_retries: int = 3, base_delay: float = 1.0) -> str:
    """Fetch a page with exponential backoff.

    Raises SourceUnavailable once retries are exhausted.
    """
    fetch = retry(
        reraise=False,
        stop=stop_after_attempt(max_retries),
        wait=wait_exponential(multiplier=base_delay, min=base_delay, max=8 * base_delay),
        retry=retry_if_exception_type((requests.RequestException, _RetryableStatus)),
    )(_get_once)
    try:
        return fetch(url, timeout)
    except RetryError as e:
        cause = e.last_attempt.exception()
        raise SourceUnavailable(f"Failed to fetch {url}: {cause}") from cause
