"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 1024
_INT_MAX = 2**31 - 1


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, keeping unread data between calls.

    Lines keep their trailing newline; the last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0 or buffer_size >= _INT_MAX:
            raise ValueError(f"invalid buffer size {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._sep: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream has nothing more."""
        pending = self._pending
        while pending is None or self._sep not in pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            if self._sep is None:
                self._sep = (
                    b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
                )  # type: ignore[assignment]
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        end = pending.find(self._sep)  # type: ignore[arg-type]
        if end == -1:
            self._pending = None
            return pending
        rest = pending[end + 1 :]
        self._pending = rest if rest else None
        return pending[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield every line of ``stream``."""
    yield from LineReader(stream)