"""aur-trust exception hierarchy.

All public exceptions inherit from AurTrustError, giving callers a single
base class to catch when they want to handle any aur-trust failure without
swallowing unrelated errors.

The trust algebra in ``aur_trust.core`` never raises: these errors come
from the collaborators that gather evidence (AUR RPC, git, configuration).
"""


class AurTrustError(Exception):
    """Base exception for all aur-trust errors."""


class AurRpcError(AurTrustError):
    """Raised when an AUR RPC request fails.

    Covers transport errors, timeouts, non-success HTTP statuses,
    malformed JSON and error responses reported by the RPC endpoint.
    """


class GitSignatureError(AurTrustError):
    """Raised when the signature on a commit cannot be inspected.

    Covers a missing git binary, git exiting with an error (e.g. the
    path is not a repository) and unparseable ``git log`` output.
    """


class TrustDatabaseError(AurTrustError):
    """Raised when the trust database cannot be loaded.

    Covers missing files, invalid YAML and documents of the wrong shape.
    """
