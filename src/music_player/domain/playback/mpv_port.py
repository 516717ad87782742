"""
MPV audio output over JSON IPC.

Implements the AudioOutputPort interface by driving a headless mpv process
through its UNIX-socket JSON IPC. mpv owns decoding and the output thread;
this adapter only sends commands and reads properties.
"""

import json
import os
import socket
import subprocess
import tempfile
import time
from pathlib import Path
from typing import Any, NamedTuple, Optional

from loguru import logger
from mutagen import File as MutagenFile
from mutagen import MutagenError

from music_player.core.config import PlayerConfig

from .exceptions import AudioOutputError, DecodeError

# Seconds to wait for the IPC socket to appear after launching mpv
SOCKET_TIMEOUT = 5.0

# Seconds to wait for mpv to pick up a file after loadfile
LOAD_TIMEOUT = 2.0

POLL_INTERVAL = 0.05


class MpvStream(NamedTuple):
    """A file mpv is able to play, as vetted by decode()."""

    path: str
    duration: Optional[float] = None


def check_mpv_available() -> bool:
    """Check if MPV is available on the system."""
    try:
        result = subprocess.run(
            ["mpv", "--version"], capture_output=True, text=True, timeout=5
        )
        return result.returncode == 0
    except (subprocess.SubprocessError, FileNotFoundError, OSError):
        return False


def _send(socket_path: Optional[str], command: dict[str, Any]) -> Optional[dict]:
    """Send one JSON IPC command and return the decoded reply, or None."""
    if not socket_path or not os.path.exists(socket_path):
        return None

    try:
        with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
            sock.settimeout(2.0)
            sock.connect(socket_path)
            sock.sendall((json.dumps(command) + "\n").encode("utf-8"))
            response = sock.recv(4096).decode("utf-8").strip()
    except OSError:
        return None

    # mpv may interleave event lines; the reply is the line carrying "error"
    for line in response.splitlines():
        try:
            data = json.loads(line)
        except json.JSONDecodeError:
            continue
        if "error" in data:
            return data
    return None


def send_mpv_command(socket_path: Optional[str], command: dict[str, Any]) -> bool:
    """Send JSON IPC command to MPV."""
    reply = _send(socket_path, command)
    return reply is not None and reply.get("error") == "success"


def get_mpv_property(socket_path: Optional[str], property_name: str) -> Any:
    """Get a property value from MPV."""
    reply = _send(socket_path, {"command": ["get_property", property_name]})
    if reply and reply.get("error") == "success":
        return reply.get("data")
    return None


class MpvAudioPort:
    """AudioOutputPort backed by an mpv subprocess."""

    def __init__(self, config: PlayerConfig):
        self._config = config
        self.socket_path: Optional[str] = None
        self.process: Optional[subprocess.Popen] = None

    def __enter__(self) -> "MpvAudioPort":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def start(self) -> None:
        """Launch mpv in idle mode with JSON IPC.

        Raises:
            AudioOutputError: If mpv cannot be started or does not answer
        """
        if self._config.mpv_socket_path:
            socket_path = self._config.mpv_socket_path
        else:
            temp_dir = Path(tempfile.gettempdir())
            socket_path = str(temp_dir / f"mpv-socket-{os.getpid()}")

        logger.info(f"Starting MPV player with socket: {socket_path}")

        if os.path.exists(socket_path):
            logger.debug(f"Removing existing socket: {socket_path}")
            os.unlink(socket_path)

        cmd = [
            "mpv",
            "--idle=yes",
            "--no-video",
            "--no-terminal",
            f"--input-ipc-server={socket_path}",
            f"--volume={self._config.volume}",
            "--keep-open=yes",
            "--load-scripts=no",
        ]

        try:
            process = subprocess.Popen(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                stdin=subprocess.DEVNULL,
            )
        except (subprocess.SubprocessError, OSError) as e:
            raise AudioOutputError(f"Failed to start MPV: {e}") from e

        deadline = time.monotonic() + SOCKET_TIMEOUT
        while not os.path.exists(socket_path):
            if time.monotonic() > deadline or process.poll() is not None:
                process.kill()
                raise AudioOutputError(
                    f"MPV socket creation timeout after {SOCKET_TIMEOUT}s"
                )
            time.sleep(POLL_INTERVAL)

        if not send_mpv_command(socket_path, {"command": ["get_property", "idle-active"]}):
            process.kill()
            raise AudioOutputError("MPV socket connection test failed")

        self.process = process
        self.socket_path = socket_path
        logger.info("MPV started successfully")

    def close(self) -> None:
        """Stop the mpv process and remove its socket."""
        if self.process:
            try:
                self.process.kill()
                self.process.wait(timeout=2.0)
            except (OSError, subprocess.TimeoutExpired):
                pass  # Process already terminated or couldn't be killed
            self.process = None

        if self.socket_path and os.path.exists(self.socket_path):
            try:
                os.unlink(self.socket_path)
            except OSError:
                pass
        self.socket_path = None

    def is_running(self) -> bool:
        """Check if the mpv process is alive and its socket exists."""
        if not self.process or self.process.poll() is not None:
            return False
        return bool(self.socket_path) and os.path.exists(self.socket_path)

    def decode(self, path: str) -> MpvStream:
        """Vet a file for playback by reading its container with mutagen."""
        if not os.path.isfile(path):
            raise DecodeError(path, "file not found")

        try:
            audio = MutagenFile(path)
        except (MutagenError, OSError) as e:
            raise DecodeError(path, str(e)) from e

        if audio is None:
            raise DecodeError(path, "unsupported or unrecognized audio format")

        duration = getattr(getattr(audio, "info", None), "length", None)
        return MpvStream(path=path, duration=duration or None)

    def replace(self, stream: MpvStream) -> None:
        """Load a stream in place of whatever is playing and unpause."""
        if not self.is_running():
            raise AudioOutputError("MPV is not running")

        if not send_mpv_command(
            self.socket_path, {"command": ["loadfile", stream.path, "replace"]}
        ):
            raise AudioOutputError(f"MPV rejected file: {stream.path}")

        # Explicitly unpause to ensure playback starts
        send_mpv_command(self.socket_path, {"command": ["set_property", "pause", False]})

        # Wait until mpv has actually picked the file up, so is_drained()
        # does not see idle or eof state left over from the previous track
        deadline = time.monotonic() + LOAD_TIMEOUT
        while not self._is_loaded(stream.path):
            if time.monotonic() > deadline:
                raise AudioOutputError(
                    f"MPV did not start playback within {LOAD_TIMEOUT}s: {stream.path}"
                )
            time.sleep(POLL_INTERVAL)

        logger.debug(f"MPV loaded: {stream.path}")

    def set_paused(self, paused: bool) -> None:
        if not send_mpv_command(
            self.socket_path, {"command": ["set_property", "pause", paused]}
        ):
            logger.warning(f"MPV did not acknowledge pause={paused}")

    def stop(self) -> None:
        send_mpv_command(self.socket_path, {"command": ["stop"]})

    def is_drained(self) -> bool:
        """True when mpv reached end of file, went idle, or died."""
        if not self.is_running():
            return True

        if get_mpv_property(self.socket_path, "eof-reached") is True:
            return True
        return get_mpv_property(self.socket_path, "idle-active") is True

    def _is_loaded(self, path: str) -> bool:
        # Reloading the same path leaves path unchanged, so eof-reached from
        # the previous run must also have cleared
        if get_mpv_property(self.socket_path, "idle-active") is not False:
            return False
        if get_mpv_property(self.socket_path, "path") != path:
            return False
        return get_mpv_property(self.socket_path, "eof-reached") is not True
