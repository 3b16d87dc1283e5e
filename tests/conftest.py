"""Shared fixtures for aur-trust tests."""

from __future__ import annotations

from typing import Callable

import pytest

from aur_trust.core.trust import CommitSignature, GitCommit, SignatureValidity

SHA = "d62e888"
SIGNER = "Jane Doe <j.doe@example.com>"
KEY = "SHA256:xBUrqiiYS+mY5fCndm8Ye+SDU3Gr578hRbUL7ZzHbiY"


@pytest.fixture
def signed_commit() -> Callable[[SignatureValidity], GitCommit]:
    """Factory for commits signed by Jane Doe with a given validity."""

    def _make(validity: SignatureValidity) -> GitCommit:
        return GitCommit(
            abbrev_sha1=SHA,
            signature=CommitSignature(validity=validity, signer=SIGNER, key=KEY),
        )

    return _make


@pytest.fixture
def unsigned_commit() -> GitCommit:
    """A commit without signature."""
    return GitCommit(abbrev_sha1=SHA)


@pytest.fixture
def good_commit(signed_commit: Callable[[SignatureValidity], GitCommit]) -> GitCommit:
    """A commit with a good and valid signature."""
    return signed_commit(SignatureValidity.GOOD)
