"""File utility helpers."""
from __future__ import annotations

import contextlib
import os
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Iterator, Optional, Union


@contextmanager
def atomic_write(
    path: Union[str, Path],
    mode: str = "w",
    encoding: Optional[str] = "utf-8",
    permissions: int = 0o644,
) -> Iterator[IO[Any]]:
    """Write ``path`` via a temporary sibling file that replaces it on success.

    Readers of the feed file never see a half-written document; on error the
    temporary file is removed and the previous file stays in place.
    """
    target = Path(path).resolve()
    target.parent.mkdir(parents=True, exist_ok=True)

    if "b" in mode:
        encoding = None

    tmp_path = target.with_name(f"{target.name}.{uuid.uuid4().hex}.tmp")

    try:
        with open(tmp_path, mode, encoding=encoding) as f:
            yield f
            f.flush()
            os.fsync(f.fileno())
        with contextlib.suppress(OSError):
            os.chmod(tmp_path, permissions)
        os.replace(tmp_path, target)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise


__all__ = ["atomic_write"]
