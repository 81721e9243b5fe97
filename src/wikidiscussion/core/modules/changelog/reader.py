import os
from collections.abc import Iterator
from pathlib import Path

CHUNK_SIZE = 8192


def read_lines_reversed(path: Path, chunk_size: int = CHUNK_SIZE) -> Iterator[str]:
    """Yield the lines of a file from last to first, reading fixed-size chunks from the end.

    Line terminators are stripped. Bytes are only decoded once a line is complete,
    so multibyte characters split across chunks stay intact.
    """
    with path.open("rb") as fh:
        position = fh.seek(0, os.SEEK_END)
        remainder = b""
        at_end = True
        while position > 0:
            read_size = min(chunk_size, position)
            position -= read_size
            fh.seek(position)
            chunk = fh.read(read_size) + remainder
            if at_end:
                # A final newline terminates the last line, it does not start an empty one
                chunk = chunk.removesuffix(b"\n")
                at_end = False
            lines = chunk.split(b"\n")
            # The first piece may continue in the previous chunk
            remainder = lines.pop(0)
            for line in reversed(lines):
                yield line.rstrip(b"\r").decode("utf-8", errors="replace")
        if remainder:
            yield remainder.rstrip(b"\r").decode("utf-8", errors="replace")
