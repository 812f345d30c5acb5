"""Network side of the parrot: answers polls and talks to the last peer."""

from __future__ import annotations

from nxdnkit.udpsocket import UDPSocket, UDPSocketError

BUFFER_LENGTH = 200
POLL_LENGTH = 17
DATA_LENGTH = 43


class ParrotNetwork:
    """Receives NXDN frames and replies to whoever sent the latest packet."""

    def __init__(self, port: int) -> None:
        self._socket = UDPSocket(port)
        self._address = ""
        self._port = 0

    def open(self) -> None:
        """Open the socket; raises UDPSocketError on failure."""
        print("Opening NXDN network connection", flush=True)
        self._socket.open()

    def write(self, data: bytes) -> bool:
        """Send ``data`` to the current peer; with no peer nothing is sent."""
        if self._port == 0:
            return True
        try:
            self._socket.write(data, self._address, self._port)
        except UDPSocketError:
            return False
        return True

    def read(self) -> bytes:
        """Return a received 43-byte data frame, or empty bytes.

        Polls are echoed straight back to their sender and yield empty bytes,
        as does anything that is neither a poll nor a data frame.
        """
        try:
            result = self._socket.read(BUFFER_LENGTH)
        except UDPSocketError:
            return b""
        if result is None:
            return b""

        data, self._address, self._port = result

        if data.startswith(b"NXDNP") and len(data) == POLL_LENGTH:
            self.write(data)
            return b""
        if data.startswith(b"NXDND") and len(data) == DATA_LENGTH:
            return data
        return b""

    def end(self) -> None:
        """Forget the current peer."""
        self._port = 0

    def close(self) -> None:
        self._socket.close()
        print("Closing NXDN network connection", flush=True)