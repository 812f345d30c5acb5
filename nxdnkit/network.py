"""NXDN reflector network protocol over UDP."""

from __future__ import annotations

from nxdnkit.log import LogLevel, log
from nxdnkit.udpsocket import UDPSocket, UDPSocketError
from nxdnkit.utils import dump

BUFFER_LENGTH = 200
POLL_LENGTH = 17
FRAME_LENGTH = 43
PAYLOAD_LENGTH = 33

_DATA_HEADERS = (0x90, 0x92, 0x9C, 0x9E)


def build_frame(data: bytes, src_id: int, dst_id: int, grp: bool) -> bytes:
    """Wrap a 33-byte NXDN payload in a 43-byte NXDND network frame."""
    if len(data) < PAYLOAD_LENGTH:
        raise ValueError(f"payload must hold at least {PAYLOAD_LENGTH} bytes")

    flags = 0x01 if grp else 0x00
    kind = data[0]
    if kind in (0x81, 0x83):
        # Voice header or trailer.
        if data[5] == 0x01:
            flags |= 0x04
        if data[5] == 0x08:
            flags |= 0x08
    elif kind & 0xF0 == 0x90:
        flags |= 0x02
        if kind in _DATA_HEADERS:
            if data[2] == 0x09:
                flags |= 0x04
            if data[2] == 0x08:
                flags |= 0x08

    return (
        b"NXDND"
        + (src_id & 0xFFFF).to_bytes(2, "big")
        + (dst_id & 0xFFFF).to_bytes(2, "big")
        + bytes([flags])
        + bytes(data[:PAYLOAD_LENGTH])
    )


class NXDNNetwork:
    """The reflector's UDP endpoint for repeaters."""

    def __init__(self, port: int, debug: bool = False) -> None:
        self._socket = UDPSocket(port)
        self._debug = debug

    def open(self) -> None:
        """Open the socket; raises UDPSocketError on failure."""
        log(LogLevel.INFO, "Opening NXDN network connection")
        self._socket.open()

    def write(self, data: bytes, address: str, port: int) -> bool:
        """Send ``data`` unchanged; return False if sending failed."""
        if not data:
            raise ValueError("data must not be empty")
        if port <= 0:
            raise ValueError("port must be positive")
        if self._debug:
            dump("NXDN Network Data Sent", data, LogLevel.DEBUG)
        try:
            self._socket.write(data, address, port)
        except UDPSocketError:
            return False
        return True

    def write_frame(
        self, data: bytes, src_id: int, dst_id: int, grp: bool, address: str, port: int
    ) -> bool:
        """Wrap a raw NXDN payload in a network frame and send it."""
        if port <= 0:
            raise ValueError("port must be positive")
        frame = build_frame(data, src_id, dst_id, grp)
        if self._debug:
            dump("NXDN Network Data Sent", frame, LogLevel.DEBUG)
        try:
            self._socket.write(frame, address, port)
        except UDPSocketError:
            return False
        return True

    def read(self) -> tuple[bytes, str, int] | None:
        """Return ``(data, host, port)`` for a valid NXDN packet, else None."""
        try:
            result = self._socket.read(BUFFER_LENGTH)
        except UDPSocketError:
            return None
        if result is None:
            return None

        data, host, port = result
        if not data.startswith(b"NXDN"):
            return None
        if len(data) not in (POLL_LENGTH, FRAME_LENGTH):
            return None

        if self._debug:
            dump("NXDN Network Data Received", data, LogLevel.DEBUG)
        return data, host, port

    def close(self) -> None:
        self._socket.close()
        log(LogLevel.INFO, "Closing NXDN network connection")