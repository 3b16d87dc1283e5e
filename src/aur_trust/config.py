"""Loading the trust database from YAML.

The trust database file lists the maintainers trusted by policy::

    # ~/.config/aur-trust/trust.yaml
    trusted_maintainers:
      - Alad
      - swsnr

An empty document, or a document without ``trusted_maintainers``, is an
empty database.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import yaml

from aur_trust.core.trust.evidence import TrustDatabase
from aur_trust.exceptions import TrustDatabaseError

logger = logging.getLogger(__name__)

TRUSTED_MAINTAINERS_KEY: str = "trusted_maintainers"


def parse_trust_database(text: str) -> TrustDatabase:
    """Parse a trust database from YAML text.

    Raises:
        TrustDatabaseError: On invalid YAML or a document of the wrong shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise TrustDatabaseError(f"Invalid trust database YAML: {exc}") from exc

    if data is None:
        return TrustDatabase()
    if not isinstance(data, dict):
        raise TrustDatabaseError("Trust database must be a mapping")
    maintainers = data.get(TRUSTED_MAINTAINERS_KEY) or []
    if not isinstance(maintainers, list) or not all(
        isinstance(m, str) for m in maintainers
    ):
        raise TrustDatabaseError(
            f"'{TRUSTED_MAINTAINERS_KEY}' must be a list of maintainer names"
        )
    return TrustDatabase.from_maintainers(maintainers)


def load_trust_database(
    path: Path | None = None, *, extra_maintainers: Iterable[str] = ()
) -> TrustDatabase:
    """Load the trust database from ``path`` and add ``extra_maintainers``.

    Args:
        path: A YAML trust database file, or None for an empty database.
        extra_maintainers: Further maintainers to trust, e.g. from the
            command line.

    Returns:
        The combined trust database.

    Raises:
        TrustDatabaseError: If the file cannot be read or parsed.
    """
    trustdb = TrustDatabase()
    if path is not None:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TrustDatabaseError(f"Cannot read trust database {path}: {exc}") from exc
        trustdb = parse_trust_database(text)
        logger.debug("Loaded %d trusted maintainers from %s", len(trustdb), path)
    for maintainer in extra_maintainers:
        trustdb = trustdb.trust_maintainer(maintainer)
    return trustdb
