import os
import sys
from contextlib import contextmanager
from typing import IO, Iterator, Optional


class TeeStdout:
    """
    File-like object that mirrors every write to several streams,
    e.g. the console and a run log.
    """
    def __init__(self, *streams: IO[str]):
        self.streams = streams

    # Write data to all streams
    def write(self, data: str) -> None:
        for s in self.streams:
            s.write(data)
            s.flush()

    # Flush all streams
    def flush(self) -> None:
        for s in self.streams:
            s.flush()


@contextmanager
def tee_stdout(log_path: Optional[str]) -> Iterator[None]:
    """
    Duplicate sys.stdout into `log_path` for the duration of the block.
    With log_path=None, stdout is left alone.
    """
    if log_path is None:
        yield
        return

    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    orig_stdout = sys.stdout
    with open(log_path, "w", encoding="utf-8") as log_file:
        sys.stdout = TeeStdout(orig_stdout, log_file)
        try:
            yield
        finally:
            sys.stdout = orig_stdout
