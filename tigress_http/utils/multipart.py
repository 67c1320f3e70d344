"""Multipart part assembly for file uploads."""

from contextlib import ExitStack
from pathlib import Path
from typing import BinaryIO, Mapping, Optional, Union

# (name, (filename, contents)) – a None filename makes requests send a
# plain form field instead of a file part.
Part = tuple[str, tuple[Optional[str], Union[str, BinaryIO]]]


def build_multipart(
    files: Mapping[str, str],
    fields: Optional[Mapping[str, str]] = None,
) -> list[Part]:
    """
    Build the ``files=`` argument for requests from form *fields* and
    *files* (part name → local path).

    Fields come first, then files, each in mapping order.  File parts are
    opened for binary reading; once every file has opened, the handles
    belong to the transport and are not closed by this function.  If any
    path fails to open, the handles opened before it are closed and the
    OSError propagates.
    """
    parts: list[Part] = []

    for name, value in (fields or {}).items():
        parts.append((name, (None, value)))

    with ExitStack() as stack:
        for name, file_path in files.items():
            handle = stack.enter_context(open(file_path, "rb"))
            parts.append((name, (Path(file_path).name, handle)))
        stack.pop_all()

    return parts
