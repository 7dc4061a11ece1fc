"""Temporary storage for images handed over as raw bytes."""

import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


@contextmanager
def staged_image(data: bytes, *, suffix: str = ".img", directory: Path | None = None) -> Iterator[Path]:
    """Write ``data`` to a uniquely named file and remove it on exit."""
    fd, name = tempfile.mkstemp(prefix="sauce-", suffix=suffix, dir=directory)
    path = Path(name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        yield path
    finally:
        path.unlink(missing_ok=True)
