"""Client for the AUR RPC interface, version 5.

Looks up package information, most importantly the registered maintainers,
with ``type=info`` requests::

    async with AurClient() as client:
        packages = await client.info(["aurutils"])
        maintainers = packages[0].maintainers

``fetch_maintainers`` is the bridge to the trust checks: it never raises,
and represents any failure as an empty maintainer set, which the
maintainer check reports as "Maintainers unknown".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

import httpx

from aur_trust.aur.http_client import DEFAULT_TIMEOUT, create_client, fetch_json
from aur_trust.exceptions import AurRpcError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

AUR_RPC_URL: str = "https://aur.archlinux.org/rpc/"
AUR_RPC_VERSION: str = "5"


# ---------------------------------------------------------------------------
# Data models
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AurPackage:
    """Information about a single AUR package.

    Attributes:
        name: The package name.
        maintainer: The main maintainer; None if the package is orphaned.
        co_maintainers: All registered co-maintainers.
    """

    name: str
    maintainer: str | None = None
    co_maintainers: tuple[str, ...] = ()

    @classmethod
    def from_json(cls, item: Any) -> AurPackage:  # noqa: ANN401
        """Parse one entry of the ``results`` array of an info response.

        Raises:
            AurRpcError: If the entry is not an object with a ``Name``.
        """
        if not isinstance(item, dict) or not isinstance(item.get("Name"), str):
            raise AurRpcError(f"Malformed AUR package entry: {item!r}")
        maintainer = item.get("Maintainer")
        return cls(
            name=item["Name"],
            maintainer=str(maintainer) if maintainer else None,
            co_maintainers=tuple(str(m) for m in item.get("CoMaintainers") or ()),
        )

    @property
    def maintainers(self) -> frozenset[str]:
        """The primary maintainer and all co-maintainers."""
        names = set(self.co_maintainers)
        if self.maintainer:
            names.add(self.maintainer)
        return frozenset(names)


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class AurClient:
    """Async client for the AUR RPC interface.

    Args:
        client: An ``httpx.AsyncClient`` to send requests with. If None, a
            client with the aur-trust user agent and TLS settings is
            created and owned (closed by ``aclose``).
        base_url: The RPC endpoint.
        timeout: Request timeout in seconds for an owned client.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        base_url: str = AUR_RPC_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else create_client(timeout=timeout)
        self._base_url = base_url

    async def __aenter__(self) -> AurClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def info(self, packages: Iterable[str]) -> list[AurPackage]:
        """Get information about the given ``packages``.

        Packages unknown to the AUR are silently absent from the result.

        Args:
            packages: Names of the packages to look up.

        Returns:
            One ``AurPackage`` per package found, in the AUR's order.

        Raises:
            AurRpcError: If the request fails or the response is malformed.
        """
        params = [("v", AUR_RPC_VERSION), ("type", "info")]
        params.extend(("arg[]", name) for name in packages)
        data = await fetch_json(self._client, self._base_url, params=params)

        if not isinstance(data, dict):
            raise AurRpcError(f"Unexpected AUR response: {data!r}")
        if data.get("type") == "error":
            raise AurRpcError(f"AUR RPC error: {data.get('error', 'unknown error')}")
        results = data.get("results")
        if not isinstance(results, list):
            raise AurRpcError("AUR response lacks a results array")

        resultcount = data.get("resultcount")
        if resultcount != len(results):
            logger.warning(
                "Inconsistent AUR info response: resultcount %s != results.len %d",
                resultcount,
                len(results),
            )
        return [AurPackage.from_json(item) for item in results]


async def fetch_maintainers(client: AurClient, package: str) -> frozenset[str]:
    """Look up the maintainers of ``package``, never failing.

    A failed lookup is indistinguishable from an orphaned package for the
    trust checks: both give an empty set. The failure is logged so it is
    not lost entirely.

    Args:
        client: The AUR client to use.
        package: The package name.

    Returns:
        The primary and co-maintainers, or an empty set.
    """
    try:
        results = await client.info([package])
    except AurRpcError as exc:
        logger.warning("Failed to look up maintainers of %s: %s", package, exc)
        return frozenset()

    for result in results:
        if result.name == package:
            return result.maintainers
    logger.warning("Package %s not found in the AUR", package)
    return frozenset()
