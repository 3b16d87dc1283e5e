"""Trust algebra for AUR packages.

This package turns independent pieces of evidence about a package into one
three-valued verdict with a human-readable audit trail.

Submodules:
    levels    -- Trust, the three-valued domain and its meet
    verdict   -- TrustVerdict, a trust value plus the reasons behind it
    evidence  -- Commit signatures, maintainers and the trust database
    checks    -- Evaluators and the combinator

All public names are re-exported here::

    from aur_trust.core.trust import Trust, TrustVerdict, check_trust
"""

from aur_trust.core.trust.checks import (
    check_commit_signature,
    check_maintainers,
    check_trust,
    combined_verdict,
)
from aur_trust.core.trust.evidence import (
    CommitSignature,
    GitCommit,
    PackageWithEvidence,
    SignatureValidity,
    TrustDatabase,
)
from aur_trust.core.trust.levels import Trust
from aur_trust.core.trust.verdict import TrustVerdict

__all__ = [
    "CommitSignature",
    "GitCommit",
    "PackageWithEvidence",
    "SignatureValidity",
    "Trust",
    "TrustDatabase",
    "TrustVerdict",
    "check_commit_signature",
    "check_maintainers",
    "check_trust",
    "combined_verdict",
]
