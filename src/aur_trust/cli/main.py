"""aur-trust CLI: check whether AUR packages can be trusted.

Entry point for the ``aur-trust`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    check — Check the trust in a single AUR package.

Usage::

    aur-trust check aurutils --repo ~/aur/aurutils --trust-db trust.yaml
    aur-trust check 1password --trust-maintainer 1Password --format json
"""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler

from aur_trust import __version__
from aur_trust.cli.check_cmd import check_command


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """aur-trust: Check trust in AUR packages.

    Combines the signature on the HEAD commit of a package repository
    with the package's registered maintainers into a verdict of TRUSTED,
    UNTRUSTED or INDETERMINATE, with the reasons behind it.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )


# Register all subcommands
cli.add_command(check_command)
