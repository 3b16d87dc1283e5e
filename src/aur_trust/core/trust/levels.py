"""The three-valued trust domain.

Trust Order
-----------
``Trust`` is a three-element chain (total order):

    UNTRUSTED  <  TRUSTED  <  INDETERMINATE

Since this is a total order, meet reduces to min:

- **meet(a, b) = min(a, b)**: greatest lower bound
- **bottom = UNTRUSTED**: absorbing element for meet
- **top = INDETERMINATE**: identity element for meet

UNTRUSTED sits at the bottom so that one confirmed negative signal
overrides any number of positive or neutral ones (fail closed).
INDETERMINATE sits at the top so that an absence of evidence never
overrules positive evidence: TRUSTED survives a meet with INDETERMINATE.

Only meet is defined; verdicts are never combined with join.
"""

from __future__ import annotations

from enum import IntEnum


class Trust(IntEnum):
    """Three-valued trust: UNTRUSTED < TRUSTED < INDETERMINATE.

    The integer encoding (0-2) enables direct comparison via the standard
    relational operators.

    - **UNTRUSTED** (0): Evidence shows the package must not be trusted.
      The bottom element.
    - **TRUSTED** (1): Evidence shows the package can be trusted.
    - **INDETERMINATE** (2): Not enough evidence either way. The top
      element and the default.

    ``meet`` works both as a method and as an unbound class call::

        >>> Trust.TRUSTED.meet(Trust.UNTRUSTED)
        <Trust.UNTRUSTED: 0>
        >>> Trust.meet(Trust.INDETERMINATE, Trust.TRUSTED)
        <Trust.TRUSTED: 1>
    """

    UNTRUSTED = 0
    TRUSTED = 1
    INDETERMINATE = 2

    def meet(self, other: Trust) -> Trust:
        """Compute the greatest lower bound (meet) of two trust values.

        On a total order, meet is simply the minimum. This operation is:
        - Commutative: meet(a, b) == meet(b, a)
        - Associative: meet(meet(a, b), c) == meet(a, meet(b, c))
        - Idempotent: meet(a, a) == a
        - Identity element: meet(a, INDETERMINATE) == a

        Args:
            other: The trust value to combine with.

        Returns:
            The lower of the two trust values.
        """
        return Trust(min(self.value, other.value))

    @classmethod
    def bottom(cls) -> Trust:
        """Return the bottom element (UNTRUSTED).

        bottom is the absorbing element for meet: meet(a, bottom) == bottom.
        """
        return cls.UNTRUSTED

    @classmethod
    def top(cls) -> Trust:
        """Return the top element (INDETERMINATE).

        top is the identity element for meet: meet(a, top) == a.
        """
        return cls.INDETERMINATE

    @classmethod
    def default(cls) -> Trust:
        """Trust is INDETERMINATE unless evidence says otherwise."""
        return cls.INDETERMINATE
