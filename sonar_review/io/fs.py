"""sonar_review.io.fs

Atomic, stable filesystem writers.

Review output is often consumed by another process (a CI step, a review
poster). A write interrupted half-way would leave a truncated JSON file that
the consumer then fails to parse, so writes go to a temp file that is moved
into place with ``os.replace``.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any


def _atomic_write_text(
    path: Path,
    write_fn,
    *,
    encoding: str = "utf-8",
) -> None:
    """Write a file atomically by writing to a temp file and os.replace()."""

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f"{p.name}.", suffix=".tmp", dir=str(p.parent))
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            write_fn(f)
            f.flush()
            os.fsync(f.fileno())

        os.replace(tmp_path, p)
    finally:
        # Only left behind when os.replace failed.
        if tmp_path.exists():
            tmp_path.unlink()


def write_json_atomic(
    path: Path,
    data: Any,
    *,
    indent: int = 2,
    sort_keys: bool = False,
    ensure_ascii: bool = False,
    encoding: str = "utf-8",
) -> None:
    """Write JSON atomically with stable formatting.

    Keys are not sorted by default: violation order and field order are part
    of the output contract.
    """

    def _write(f) -> None:
        json.dump(data, f, indent=indent, sort_keys=sort_keys, ensure_ascii=ensure_ascii)
        f.write("\n")

    _atomic_write_text(Path(path), _write, encoding=encoding)


def read_json(path: Path, *, encoding: str = "utf-8") -> Any:
    """Read JSON from disk."""

    with Path(path).open("r", encoding=encoding) as f:
        return json.load(f)
