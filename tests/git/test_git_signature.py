"""Tests for reading and classifying the HEAD commit signature.

``subprocess.run`` is mocked except in the test against a real, unsigned
repository, which is skipped when git is not installed.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from aur_trust.core.trust import CommitSignature, GitCommit, SignatureValidity
from aur_trust.exceptions import GitSignatureError
from aur_trust.git import parse_log_line, read_head_commit

US = "\x1f"
SIGNER = "Jane Doe <j.doe@example.com>"
KEY = "ABCDEF0123456789"


def _line(code: str, signer: str = SIGNER, key: str = KEY) -> str:
    return US.join(["d62e888", code, signer, key])


def _completed(stdout: str = "", returncode: int = 0, stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(
        args=["git"], returncode=returncode, stdout=stdout, stderr=stderr
    )


# ---------------------------------------------------------------------------
# parse_log_line
# ---------------------------------------------------------------------------


class TestParseLogLine:

    @pytest.mark.parametrize(
        ("code", "validity"),
        [
            ("G", SignatureValidity.GOOD),
            ("B", SignatureValidity.BAD),
            ("U", SignatureValidity.UNKNOWN_VALIDITY),
            ("X", SignatureValidity.EXPIRED_SIGNATURE),
            ("Y", SignatureValidity.EXPIRED_KEY),
            ("R", SignatureValidity.REVOKED_KEY),
            ("E", SignatureValidity.UNKNOWN_VALIDITY),
        ],
    )
    def test_signature_codes(self, code: str, validity: SignatureValidity) -> None:
        commit = parse_log_line(_line(code))
        assert commit == GitCommit(
            abbrev_sha1="d62e888",
            signature=CommitSignature(validity=validity, signer=SIGNER, key=KEY),
        )

    def test_unsigned(self) -> None:
        commit = parse_log_line(_line("N", signer="", key=""))
        assert commit == GitCommit(abbrev_sha1="d62e888")

    def test_trailing_newline(self) -> None:
        assert parse_log_line(_line("N", "", "") + "\n").signature is None

    def test_unknown_code(self) -> None:
        with pytest.raises(GitSignatureError, match="Unknown signature status"):
            parse_log_line(_line("Q"))

    @pytest.mark.parametrize("line", ["", "d62e888", US.join(["", "N", "", ""])])
    def test_malformed(self, line: str) -> None:
        with pytest.raises(GitSignatureError, match="Unexpected git log output"):
            parse_log_line(line)


# ---------------------------------------------------------------------------
# read_head_commit
# ---------------------------------------------------------------------------


class TestReadHeadCommit:

    def test_runs_git_log_on_head(self, tmp_path: Path) -> None:
        with patch(
            "aur_trust.git.signature.subprocess.run",
            return_value=_completed(_line("G") + "\n"),
        ) as run:
            commit = read_head_commit(tmp_path)
        command = run.call_args.args[0]
        assert command[:3] == ["git", "-C", str(tmp_path)]
        assert command[-1] == "HEAD"
        assert "--format=%h%x1f%G?%x1f%GS%x1f%GK" in command
        assert commit.signature is not None
        assert commit.signature.validity is SignatureValidity.GOOD

    def test_git_failure(self, tmp_path: Path) -> None:
        with patch(
            "aur_trust.git.signature.subprocess.run",
            return_value=_completed(returncode=128, stderr="fatal: not a git repository"),
        ):
            with pytest.raises(GitSignatureError, match="not a git repository"):
                read_head_commit(tmp_path)

    def test_missing_git(self, tmp_path: Path) -> None:
        with patch(
            "aur_trust.git.signature.subprocess.run",
            side_effect=FileNotFoundError("git"),
        ):
            with pytest.raises(GitSignatureError, match="Failed to run"):
                read_head_commit(tmp_path)

    def test_timeout(self, tmp_path: Path) -> None:
        with patch(
            "aur_trust.git.signature.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="git", timeout=1.0),
        ):
            with pytest.raises(GitSignatureError, match="timed out"):
                read_head_commit(tmp_path, timeout=1.0)

    def test_empty_output(self, tmp_path: Path) -> None:
        with patch(
            "aur_trust.git.signature.subprocess.run",
            return_value=_completed(""),
        ):
            with pytest.raises(GitSignatureError):
                read_head_commit(tmp_path)

    @pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
    def test_real_unsigned_repository(self, tmp_path: Path) -> None:
        def git(*args: str) -> None:
            subprocess.run(["git", "-C", str(tmp_path), *args], check=True, capture_output=True)

        git("init", "-q")
        git("-c", "user.name=Test", "-c", "user.email=test@example.com",
            "-c", "commit.gpgsign=false",
            "commit", "-q", "--allow-empty", "-m", "init")
        commit = read_head_commit(tmp_path)
        assert commit.signature is None
        assert len(commit.abbrev_sha1) >= 7
