"""``aur-trust check <package>`` — Check the trust in an AUR package.

Reads the signature state of the HEAD commit of the package's checked-out
repository, looks up the package's maintainers in the AUR, and combines
both pieces of evidence against the trust database.

A failed maintainer lookup does not abort the check: it is logged and the
maintainers count as unknown.

Exit Codes:
    0 — The package is trusted.
    1 — The package is untrusted.
    2 — The check could not be run (bad trust database, git failure).
    3 — Trust in the package is indeterminate.
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import click

from aur_trust.aur import AurClient, fetch_maintainers
from aur_trust.aur.http_client import DEFAULT_TIMEOUT
from aur_trust.config import load_trust_database
from aur_trust.core.trust import PackageWithEvidence, Trust, check_trust
from aur_trust.exceptions import AurTrustError
from aur_trust.git import read_head_commit

EXIT_CODES: dict[Trust, int] = {
    Trust.TRUSTED: 0,
    Trust.UNTRUSTED: 1,
    Trust.INDETERMINATE: 3,
}
EXIT_ERROR: int = 2


async def _lookup_maintainers(package: str, timeout: float) -> frozenset[str]:
    """Fetch the maintainers of ``package`` with a short-lived client."""
    async with AurClient(timeout=timeout) as client:
        return await fetch_maintainers(client, package)


@click.command("check")
@click.argument("package")
@click.option(
    "--repo",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Checked-out git repository of the package.",
)
@click.option(
    "--trust-db",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="AUR_TRUST_DB",
    default=None,
    help="YAML file listing trusted maintainers (env: AUR_TRUST_DB).",
)
@click.option(
    "--trust-maintainer",
    "trusted_maintainers",
    multiple=True,
    help="Additionally trust this maintainer. May be repeated.",
)
@click.option(
    "--timeout",
    type=float,
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Timeout for AUR requests in seconds.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def check_command(
    package: str,
    repo: Path,
    trust_db: Path | None,
    trusted_maintainers: tuple[str, ...],
    timeout: float,
    output_format: str,
) -> None:
    """Check the trust in the AUR package PACKAGE.

    Exit code 0 if trusted, 1 if untrusted, 3 if indeterminate and 2 if
    the check could not be run.
    """
    try:
        trustdb = load_trust_database(trust_db, extra_maintainers=trusted_maintainers)
        head_commit = read_head_commit(repo)
    except AurTrustError as exc:
        if output_format == "json":
            click.echo(json.dumps({"package": package, "error": str(exc)}))
        else:
            click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_ERROR)

    maintainers = asyncio.run(_lookup_maintainers(package, timeout))
    evidence = PackageWithEvidence(
        name=package, maintainers=maintainers, head_commit=head_commit
    )
    verdict = check_trust(trustdb, evidence)

    if output_format == "json":
        click.echo(json.dumps({"package": package, **verdict.as_dict()}, indent=2))
    else:
        from aur_trust.cli.output import print_verdict
        print_verdict(package, verdict)

    sys.exit(EXIT_CODES[verdict.trust])
