"""Shared async HTTP client utilities for AUR RPC requests.

Provides a thin wrapper around ``httpx.AsyncClient`` with standardised
timeouts, user-agent headers, TLS settings and error handling, so that
HTTP behaviour is consistent and testable.

Raises ``AurRpcError`` (a subclass of ``AurTrustError``) on any HTTP
failure; callers decide how to degrade.
"""

from __future__ import annotations

import logging
import ssl
from typing import Any

import httpx

from aur_trust import __version__
from aur_trust.aur.certs import ISRG_ROOT_X1_PEM
from aur_trust.exceptions import AurRpcError

logger = logging.getLogger(__name__)

# Timeout for all AUR HTTP requests (seconds).
DEFAULT_TIMEOUT: float = 30.0

# User-Agent sent with every request.
USER_AGENT: str = f"aur-trust/{__version__}"


def tls_context() -> ssl.SSLContext:
    """Return the TLS context for AUR requests.

    Only the ISRG Root X1 certificate is trusted; the system trust store is
    not loaded. The AUR RPC endpoint supports TLS 1.3, so nothing older is
    accepted.
    """
    context = ssl.create_default_context(cadata=ISRG_ROOT_X1_PEM)
    context.minimum_version = ssl.TLSVersion.TLSv1_3
    return context


def create_client(*, timeout: float = DEFAULT_TIMEOUT) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` configured for AUR requests.

    Args:
        timeout: Request timeout in seconds.

    Returns:
        A new client; the caller is responsible for closing it.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
        follow_redirects=True,
        verify=tls_context(),
    )


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    params: list[tuple[str, str]] | None = None,
) -> Any:  # noqa: ANN401
    """GET a URL and parse the response as JSON.

    Args:
        client: The client to send the request with.
        url: The URL to fetch.
        params: Optional query parameters; a list so keys may repeat.

    Returns:
        Parsed JSON response.

    Raises:
        AurRpcError: On HTTP errors, timeouts, or invalid JSON.
    """
    try:
        resp = await client.get(url, params=params)
        logger.debug("GET %s -> %d", resp.url, resp.status_code)
        resp.raise_for_status()
        return resp.json()
    except httpx.TimeoutException as exc:
        raise AurRpcError(f"Timeout fetching {url}") from exc
    except httpx.HTTPStatusError as exc:
        raise AurRpcError(
            f"HTTP {exc.response.status_code} from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise AurRpcError(f"Request error for {url}: {exc}") from exc
    except ValueError as exc:
        raise AurRpcError(f"Invalid JSON from {url}: {exc}") from exc
