"""aur-trust: Track trust in packages from the Arch User Repository."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MPL-2.0"
