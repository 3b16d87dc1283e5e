"""Evidence evaluators and the verdict combinator.

Each evaluator turns one piece of evidence into a ``TrustVerdict``:

- ``check_commit_signature``: the signature on the HEAD commit. This is
  the only evaluator that can return UNTRUSTED, because a signature is
  cryptographically verifiable.
- ``check_maintainers``: the registered maintainers against the trust
  database. Reputation is a weaker signal, so this evaluator returns at
  worst INDETERMINATE.

``check_trust`` combines both with ``combined_verdict``, a plain fold with
meet. All policy lives in the trust order and in the evaluators; the
combinator has no branches of its own.

Every function here is total and pure. Absence of evidence is data
(an INDETERMINATE verdict), never an exception.
"""

from __future__ import annotations

import logging
from typing import Iterable

from aur_trust.core.lattice import meet_all
from aur_trust.core.trust.evidence import (
    GitCommit,
    PackageWithEvidence,
    SignatureValidity,
    TrustDatabase,
)
from aur_trust.core.trust.levels import Trust
from aur_trust.core.trust.verdict import TrustVerdict

logger = logging.getLogger(__name__)


def check_commit_signature(commit: GitCommit) -> TrustVerdict:
    """Check the signature on the HEAD ``commit`` of a package.

    An unsigned commit yields an INDETERMINATE verdict. A signed commit
    yields a TRUSTED verdict if and only if git considers the signature
    good and valid, i.e. the key is trusted; any other validity yields an
    UNTRUSTED verdict with a reason describing the failure.

    Args:
        commit: The HEAD commit of the package repository.

    Returns:
        A verdict with exactly one reason, which names the commit.
    """
    sha = commit.abbrev_sha1
    signature = commit.signature
    if signature is None:
        return TrustVerdict.default().add_reason(
            f"HEAD commit {sha} has no signature"
        )

    signer, key = signature.signer, signature.key
    validity = signature.validity
    if validity is SignatureValidity.GOOD:
        return TrustVerdict.trusted().add_reason(
            f"HEAD commit {sha} signed by {signer} with key {key}"
        )
    if validity is SignatureValidity.BAD:
        reason = f"HEAD commit {sha} had bad signature"
    elif validity is SignatureValidity.UNKNOWN_VALIDITY:
        reason = (
            f"Validity of signature of {signer} with key {key} "
            f"on HEAD commit {sha} is not known"
        )
    elif validity is SignatureValidity.EXPIRED_SIGNATURE:
        reason = f"Signature of {signer} with key {key} on HEAD commit {sha} is expired"
    elif validity is SignatureValidity.EXPIRED_KEY:
        reason = f"Signature of {signer} on HEAD commit {sha} was made with expired key {key}"
    elif validity is SignatureValidity.REVOKED_KEY:
        reason = f"Signature of {signer} on HEAD commit {sha} was made with revoked key {key}"
    else:  # pragma: no cover - SignatureValidity is exhaustive
        raise AssertionError(f"Unhandled signature validity: {validity!r}")
    return TrustVerdict.untrusted().add_reason(reason)


def check_maintainers(
    trustdb: TrustDatabase, maintainers: Iterable[str]
) -> TrustVerdict:
    """Check whether all ``maintainers`` are trusted.

    Returns a TRUSTED verdict if and only if every maintainer is in
    ``trustdb``. Otherwise returns an INDETERMINATE verdict:

    - With no maintainers, because the package is orphaned or looking up
      its maintainers failed, the only reason is "Maintainers unknown".
    - With untrusted maintainers, there is one reason per untrusted
      maintainer, in sorted order. An unknown maintainer is no proof of
      malice, and a good HEAD signature may still make the package trusted.

    Args:
        trustdb: The database of trusted maintainers. Not modified.
        maintainers: Names of the package maintainers.

    Returns:
        The verdict on the maintainers.
    """
    maintainers = frozenset(maintainers)
    if not maintainers:
        return TrustVerdict.default().add_reason("Maintainers unknown")

    untrusted = trustdb.untrusted(maintainers)
    if not untrusted:
        return TrustVerdict.default().set_trust(Trust.TRUSTED).add_reason(
            "All maintainers trusted"
        )

    verdict = TrustVerdict.default()
    for maintainer in untrusted:
        verdict = verdict.add_reason(f"Maintainer {maintainer} is not trusted")
    return verdict


def combined_verdict(verdicts: Iterable[TrustVerdict]) -> TrustVerdict:
    """Combine ``verdicts`` into one by repeated meet.

    Any UNTRUSTED verdict makes the result UNTRUSTED. Otherwise a TRUSTED
    verdict wins over INDETERMINATE ones, and only if every verdict is
    INDETERMINATE (or there are none) is the result INDETERMINATE.

    Args:
        verdicts: Verdicts on individual pieces of evidence.

    Returns:
        The combined verdict with the reasons explaining it.
    """
    return meet_all(verdicts, TrustVerdict.top())


def check_trust(trustdb: TrustDatabase, package: PackageWithEvidence) -> TrustVerdict:
    """Check the trust in ``package``.

    Checks the signature on the HEAD commit and the registered
    maintainers, and combines both verdicts.

    Args:
        trustdb: The database of trusted maintainers.
        package: The package with its evidence.

    Returns:
        The overall verdict on the package.
    """
    commit_verdict = check_commit_signature(package.head_commit)
    maintainer_verdict = check_maintainers(trustdb, package.maintainers)
    verdict = combined_verdict([commit_verdict, maintainer_verdict])
    logger.debug(
        "Package %s: signature %s, maintainers %s, combined %s",
        package.name,
        commit_verdict.trust.name,
        maintainer_verdict.trust.name,
        verdict.trust.name,
    )
    return verdict
