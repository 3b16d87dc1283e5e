"""Tests for evidence value types and the trust database."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from aur_trust.core.trust import (
    CommitSignature,
    GitCommit,
    PackageWithEvidence,
    SignatureValidity,
    TrustDatabase,
)


class TestSignatureValidity:

    def test_exactly_six_states(self) -> None:
        assert len(SignatureValidity) == 6


class TestGitCommit:

    def test_unsigned_by_default(self) -> None:
        assert GitCommit("d62e888").signature is None

    def test_signed(self) -> None:
        sig = CommitSignature(SignatureValidity.GOOD, "Jane Doe", "K")
        assert GitCommit("d62e888", sig).signature == sig


class TestTrustDatabase:
    """The trust database is an immutable set of maintainers."""

    def test_empty_by_default(self) -> None:
        db = TrustDatabase()
        assert len(db) == 0
        assert "alice" not in db

    def test_trust_maintainer_returns_new_database(self) -> None:
        db = TrustDatabase()
        updated = db.trust_maintainer("alice")
        assert "alice" in updated
        assert updated.is_trusted("alice")
        assert "alice" not in db

    def test_set_trusted_maintainers_replaces(self) -> None:
        db = TrustDatabase().trust_maintainer("alice")
        replaced = db.set_trusted_maintainers(["bob", "carol"])
        assert replaced.trusted_maintainers == frozenset({"bob", "carol"})
        assert db.trusted_maintainers == frozenset({"alice"})

    def test_accepts_plain_sets(self) -> None:
        db = TrustDatabase({"alice"})  # type: ignore[arg-type]
        assert isinstance(db.trusted_maintainers, frozenset)
        assert db == TrustDatabase.from_maintainers(["alice"])

    def test_untrusted_is_sorted_difference(self) -> None:
        db = TrustDatabase.from_maintainers(["foo"])
        assert db.untrusted({"foo", "zed", "bar"}) == ["bar", "zed"]

    def test_single_name_string_rejected(self) -> None:
        with pytest.raises(TypeError, match="collection of maintainer names"):
            TrustDatabase("alice")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            TrustDatabase.from_maintainers("alice")
        with pytest.raises(TypeError):
            TrustDatabase().set_trusted_maintainers("alice")
        with pytest.raises(TypeError):
            TrustDatabase().untrusted("alice")

    def test_frozen(self) -> None:
        db = TrustDatabase()
        with pytest.raises(FrozenInstanceError):
            db.trusted_maintainers = frozenset({"x"})  # type: ignore[misc]


class TestPackageWithEvidence:

    def test_maintainers_coerced_to_frozenset(self) -> None:
        package = PackageWithEvidence(
            name="aurutils",
            maintainers={"Alad"},  # type: ignore[arg-type]
            head_commit=GitCommit("abc1234"),
        )
        assert package.maintainers == frozenset({"Alad"})
        assert isinstance(package.maintainers, frozenset)

    def test_single_maintainer_string_rejected(self) -> None:
        with pytest.raises(TypeError):
            PackageWithEvidence("aurutils", "Alad", GitCommit("abc1234"))  # type: ignore[arg-type]

    def test_empty_maintainers_allowed(self) -> None:
        package = PackageWithEvidence("orphan", frozenset(), GitCommit("abc1234"))
        assert package.maintainers == frozenset()
