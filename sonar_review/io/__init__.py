"""sonar_review.io

Filesystem helpers shared by the parser and the CLI.
"""

from __future__ import annotations

from .fs import read_json, write_json_atomic

__all__ = [
    "read_json",
    "write_json_atomic",
]
