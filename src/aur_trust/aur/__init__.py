"""Maintainer lookup through the AUR RPC interface.

Public API::

    from aur_trust.aur import AurClient, AurPackage, fetch_maintainers
"""

from __future__ import annotations

from aur_trust.aur.rpc import AurClient, AurPackage, fetch_maintainers

__all__ = [
    "AurClient",
    "AurPackage",
    "fetch_maintainers",
]
