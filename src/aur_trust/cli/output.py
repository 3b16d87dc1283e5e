"""Rich output formatting helpers for the aur-trust CLI.

Trust Color Mapping:
    TRUSTED = bold green, INDETERMINATE = yellow, UNTRUSTED = bold red
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from aur_trust.core.trust import Trust, TrustVerdict

_TRUST_STYLES: dict[Trust, str] = {
    Trust.TRUSTED: "bold green",
    Trust.INDETERMINATE: "yellow",
    Trust.UNTRUSTED: "bold red",
}

console = Console()


def trust_style(trust: Trust) -> str:
    """Return the Rich style string for a given trust value."""
    return _TRUST_STYLES.get(trust, "white")


def print_verdict(package: str, verdict: TrustVerdict) -> None:
    """Print a verdict on a package with its reasons.

    Args:
        package: Name of the checked package.
        verdict: The combined verdict for the package.
    """
    header = Text.assemble(
        ("Package: ", "bold"), (package, ""),
        ("  Trust: ", "bold"), (verdict.trust.name, trust_style(verdict.trust)),
    )
    console.print(Panel(header, title="Trust Verdict"))

    if not verdict.reasons:
        console.print("[dim]No reasons given.[/dim]")
        return

    table = Table(title="Reasons", show_header=False)
    table.add_column("Reason")
    for reason in verdict.reasons:
        table.add_row(Text(reason))
    console.print(table)
