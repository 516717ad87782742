"""
Audio output port - the narrow interface the controller drives.

Decoding, buffering, mixing and the output thread all live behind this
interface. The controller only ever calls the five operations below.
"""

from typing import Any, Protocol, runtime_checkable

# Opaque handle produced by decode() and consumed by replace()
Stream = Any


@runtime_checkable
class AudioOutputPort(Protocol):
    """Command/query interface to an audio engine."""

    def decode(self, path: str) -> Stream:
        """Open a file and produce a playable stream.

        Raises:
            DecodeError: If the file is missing, corrupt or unsupported
        """
        ...

    def replace(self, stream: Stream) -> None:
        """Discard any queued stream and start playing this one.

        Raises:
            AudioOutputError: If the engine refuses the stream
        """
        ...

    def set_paused(self, paused: bool) -> None:
        """Pause or resume output."""
        ...

    def stop(self) -> None:
        """Stop output and drop the queued stream."""
        ...

    def is_drained(self) -> bool:
        """True once the queued stream has produced all its output."""
        ...
