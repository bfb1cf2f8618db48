# icloud_pricing/pricing/http_fetch.py
import json
import logging
from typing import Any, Optional

import httpx

from ..errors import NetworkError, ParseError

_LOGGER = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)
MAX_REDIRECTS = 5


def fetch_text(
    url: str,
    timeout: float,
    transport: Optional[httpx.BaseTransport] = None,
) -> str:
    """
    Single GET, following redirects. No retries.

    Timeouts, connection errors, non-2xx answers and redirect loops all
    surface as NetworkError so callers only have one thing to catch.
    """
    client = httpx.Client(
        timeout=httpx.Timeout(timeout, connect=min(timeout, 10.0)),
        follow_redirects=True,
        max_redirects=MAX_REDIRECTS,
        headers={"User-Agent": USER_AGENT},
        transport=transport,
    )
    try:
        _LOGGER.debug("GET %s (timeout=%ss)", url, timeout)
        resp = client.get(url)
        resp.raise_for_status()
        return resp.text
    except httpx.TimeoutException as ex:
        raise NetworkError(f"request to {url} timed out after {timeout}s") from ex
    except httpx.HTTPStatusError as ex:
        raise NetworkError(f"HTTP {ex.response.status_code} from {url}") from ex
    except (httpx.InvalidURL, httpx.UnsupportedProtocol) as ex:
        # InvalidURL is not an HTTPError subclass
        raise NetworkError(f"cannot request {url!r}: {ex}") from ex
    except httpx.HTTPError as ex:
        raise NetworkError(f"request to {url} failed: {ex}") from ex
    finally:
        client.close()


def fetch_json(
    url: str,
    timeout: float,
    transport: Optional[httpx.BaseTransport] = None,
) -> Any:
    text = fetch_text(url, timeout, transport=transport)
    try:
        return json.loads(text)
    except json.JSONDecodeError as ex:
        raise ParseError(f"response from {url} is not valid JSON: {ex}") from ex
