"""Read the HEAD commit of a package repository and classify its signature.

Runs ``git log`` with the ``%G?`` placeholder, which asks git to verify the
commit signature against the user's keyring, and maps git's one-letter
status to ``SignatureValidity``:

=====  ==================================================  ==================
Code   Meaning (git)                                       SignatureValidity
=====  ==================================================  ==================
G      good (valid) signature                              GOOD
B      bad signature                                       BAD
U      good signature with unknown validity                UNKNOWN_VALIDITY
X      good signature that has expired                     EXPIRED_SIGNATURE
Y      good signature made by an expired key               EXPIRED_KEY
R      good signature made by a revoked key                REVOKED_KEY
E      signature cannot be checked (e.g. missing key)      UNKNOWN_VALIDITY
N      no signature                                        (unsigned)
=====  ==================================================  ==================
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from aur_trust.core.trust.evidence import CommitSignature, GitCommit, SignatureValidity
from aur_trust.exceptions import GitSignatureError

logger = logging.getLogger(__name__)

# Fields are separated by ASCII unit separators, which never occur in
# hashes, signer names or key fingerprints.
FIELD_SEPARATOR: str = "\x1f"
LOG_FORMAT: str = "%h%x1f%G?%x1f%GS%x1f%GK"
GIT_TIMEOUT: float = 30.0

_VALIDITY_CODES: dict[str, SignatureValidity] = {
    "G": SignatureValidity.GOOD,
    "B": SignatureValidity.BAD,
    "U": SignatureValidity.UNKNOWN_VALIDITY,
    "X": SignatureValidity.EXPIRED_SIGNATURE,
    "Y": SignatureValidity.EXPIRED_KEY,
    "R": SignatureValidity.REVOKED_KEY,
    "E": SignatureValidity.UNKNOWN_VALIDITY,
}
_UNSIGNED_CODE: str = "N"


def parse_log_line(line: str) -> GitCommit:
    """Parse one line of ``git log --format=LOG_FORMAT`` output.

    Args:
        line: ``<abbrev hash> US <status> US <signer> US <key>``.

    Returns:
        The commit with its signature, if any.

    Raises:
        GitSignatureError: If the line is malformed or the status unknown.
    """
    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(fields) != 4 or not fields[0]:
        raise GitSignatureError(f"Unexpected git log output: {line!r}")
    abbrev_sha1, code, signer, key = fields

    if code == _UNSIGNED_CODE:
        return GitCommit(abbrev_sha1=abbrev_sha1)
    validity = _VALIDITY_CODES.get(code)
    if validity is None:
        raise GitSignatureError(
            f"Unknown signature status {code!r} for commit {abbrev_sha1}"
        )
    return GitCommit(
        abbrev_sha1=abbrev_sha1,
        signature=CommitSignature(validity=validity, signer=signer, key=key),
    )


def read_head_commit(
    repo: Path, *, git: str = "git", timeout: float = GIT_TIMEOUT
) -> GitCommit:
    """Read and classify the HEAD commit of the repository at ``repo``.

    Args:
        repo: Path to a git working tree.
        git: The git executable.
        timeout: Seconds to wait for git, which may wait on gpg.

    Returns:
        The HEAD commit with its signature state.

    Raises:
        GitSignatureError: If git is missing, fails or times out.
    """
    command = [git, "-C", str(repo), "log", "-1", f"--format={LOG_FORMAT}", "HEAD"]
    logger.debug("Running %s", " ".join(command))
    try:
        proc = subprocess.run(
            command,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise GitSignatureError(f"git log timed out after {timeout}s in {repo}") from exc
    except OSError as exc:
        raise GitSignatureError(f"Failed to run {git}: {exc}") from exc

    if proc.returncode != 0:
        raise GitSignatureError(
            f"git log failed in {repo} (exit {proc.returncode}): "
            f"{proc.stderr.strip()}"
        )
    lines = proc.stdout.splitlines()
    commit = parse_log_line(lines[0] if lines else "")
    logger.debug("HEAD of %s is %s", repo, commit)
    return commit
