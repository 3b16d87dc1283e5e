"""Signature inspection of git commits.

Public API::

    from aur_trust.git import read_head_commit, parse_log_line
"""

from __future__ import annotations

from aur_trust.git.signature import parse_log_line, read_head_commit

__all__ = [
    "parse_log_line",
    "read_head_commit",
]
