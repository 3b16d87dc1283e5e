"""Trust verdicts: a trust value together with the reasons behind it.

A ``TrustVerdict`` is the output of every evaluator and of the combinator.
Its reasons form the audit trail a human reviewer reads, so combining two
verdicts must keep exactly the reasons that explain the combined outcome.

Meet on Verdicts
----------------
``l.meet(r)`` computes ``t = l.trust.meet(r.trust)`` and keeps the reasons
of every operand whose own trust equals ``t``. The retained reasons are
sorted, which makes meet commutative on the observable state and not just
on the trust value. Exact duplicate reasons are kept: two evaluators
reporting the same thing independently corroborate each other.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from aur_trust.core.trust.levels import Trust


@dataclass(frozen=True)
class TrustVerdict:
    """An immutable trust value with an ordered tuple of reasons.

    Builders such as ``add_reason`` and ``set_trust`` return new verdicts;
    callers must rebind the result.

    Attributes:
        trust: The trust value of this verdict.
        reasons: Human-readable explanations of ``trust``.

    Examples:
        >>> verdict = TrustVerdict.trusted().add_reason("All maintainers trusted")
        >>> verdict.meet(TrustVerdict.default()).trust
        <Trust.TRUSTED: 1>
    """

    trust: Trust = Trust.INDETERMINATE
    reasons: tuple[str, ...] = ()

    @classmethod
    def default(cls) -> TrustVerdict:
        """An indeterminate verdict without reasons; the start of any fold."""
        return cls()

    @classmethod
    def top(cls) -> TrustVerdict:
        """The identity for meet, which is the default verdict."""
        return cls.default()

    @classmethod
    def trusted(cls) -> TrustVerdict:
        return cls(trust=Trust.TRUSTED)

    @classmethod
    def untrusted(cls) -> TrustVerdict:
        return cls(trust=Trust.UNTRUSTED)

    def set_trust(self, trust: Trust) -> TrustVerdict:
        """Return a copy of this verdict with ``trust`` replaced."""
        return replace(self, trust=trust)

    def add_reason(self, reason: str) -> TrustVerdict:
        """Return a copy of this verdict with ``reason`` appended."""
        return replace(self, reasons=(*self.reasons, reason))

    def meet(self, other: TrustVerdict) -> TrustVerdict:
        """Compute the greatest lower bound of two verdicts.

        The trust of the result is the meet of both trust values. The
        reasons of the result are the reasons of each operand whose trust
        equals the combined trust, sorted lexicographically.

        This operation is commutative and associative, and idempotent in
        the trust value. Reasons of ``a.meet(a)`` appear twice since
        duplicates are not removed.

        Args:
            other: The verdict to combine with.

        Returns:
            A new verdict for the combined evidence.
        """
        trust = self.trust.meet(other.trust)
        reasons: list[str] = []
        if self.trust == trust:
            reasons.extend(self.reasons)
        if other.trust == trust:
            reasons.extend(other.reasons)
        return TrustVerdict(trust=trust, reasons=tuple(sorted(reasons)))

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable view of this verdict."""
        return {"trust": self.trust.name, "reasons": list(self.reasons)}
