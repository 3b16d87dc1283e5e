"""Evidence about an AUR package.

Raw, externally supplied facts that the evaluators in ``checks`` turn into
verdicts: the signature on the package repository's HEAD commit and the
package's registered maintainers, judged against a trust database.

All types are immutable values. A ``TrustDatabase`` is owned by the caller
and never changed by the evaluators; its "mutators" return new databases.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


def _names(maintainers: Iterable[str]) -> frozenset[str]:
    """Freeze a collection of maintainer names.

    Raises:
        TypeError: If given a single string instead of a collection.
    """
    if isinstance(maintainers, str):
        raise TypeError(
            f"Expected a collection of maintainer names, got the string {maintainers!r}"
        )
    return frozenset(maintainers)


class SignatureValidity(Enum):
    """The validity of a commit signature, as classified by git."""

    GOOD = "good"
    """The signature is good and valid."""
    BAD = "bad"
    """The signature is bad, e.g. in an invalid format."""
    UNKNOWN_VALIDITY = "unknown_validity"
    """The signature is good, but its validity is unknown."""
    EXPIRED_SIGNATURE = "expired_signature"
    """The signature has expired."""
    EXPIRED_KEY = "expired_key"
    """The signature is good, but the signing key has expired."""
    REVOKED_KEY = "revoked_key"
    """The signing key was revoked."""


@dataclass(frozen=True)
class CommitSignature:
    """The signature on a commit.

    Attributes:
        validity: How git classified the signature.
        signer: Name of the signer, e.g. ``Jane Doe <j.doe@example.com>``.
        key: The key used to sign, e.g. a fingerprint.
    """

    validity: SignatureValidity
    signer: str
    key: str


@dataclass(frozen=True)
class GitCommit:
    """A git commit, reduced to what trust checks need.

    Attributes:
        abbrev_sha1: The abbreviated hash of the commit.
        signature: The signature on the commit; None for unsigned commits.
    """

    abbrev_sha1: str
    signature: CommitSignature | None = None


@dataclass(frozen=True)
class TrustDatabase:
    """The set of maintainers trusted by policy.

    Attributes:
        trusted_maintainers: Names of trusted AUR maintainers.

    Examples:
        >>> db = TrustDatabase().trust_maintainer("alice")
        >>> "alice" in db
        True
        >>> db.untrusted({"alice", "bob"})
        ['bob']
    """

    trusted_maintainers: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "trusted_maintainers", _names(self.trusted_maintainers)
        )

    @classmethod
    def from_maintainers(cls, maintainers: Iterable[str]) -> TrustDatabase:
        return cls(trusted_maintainers=_names(maintainers))

    def set_trusted_maintainers(self, maintainers: Iterable[str]) -> TrustDatabase:
        """Return a database trusting exactly ``maintainers``."""
        return TrustDatabase(trusted_maintainers=_names(maintainers))

    def trust_maintainer(self, maintainer: str) -> TrustDatabase:
        """Return a database which additionally trusts ``maintainer``."""
        return TrustDatabase(
            trusted_maintainers=self.trusted_maintainers | {maintainer}
        )

    def is_trusted(self, maintainer: str) -> bool:
        return maintainer in self.trusted_maintainers

    def untrusted(self, maintainers: Iterable[str]) -> list[str]:
        """Return the members of ``maintainers`` not in this database, sorted."""
        return sorted(_names(maintainers) - self.trusted_maintainers)

    def __contains__(self, item: object) -> bool:
        return item in self.trusted_maintainers

    def __len__(self) -> int:
        return len(self.trusted_maintainers)


@dataclass(frozen=True)
class PackageWithEvidence:
    """An AUR package together with the evidence needed to judge it.

    An empty ``maintainers`` set is valid: the package is orphaned, or
    looking up its maintainers failed.

    Attributes:
        name: The package name.
        maintainers: Primary and co-maintainers of the package.
        head_commit: The HEAD commit of the package repository.
    """

    name: str
    maintainers: frozenset[str]
    head_commit: GitCommit

    def __post_init__(self) -> None:
        object.__setattr__(self, "maintainers", _names(self.maintainers))
