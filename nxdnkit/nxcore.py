"""Link between the reflector and an NXCore server using ICOM framing."""

from __future__ import annotations

from nxdnkit.log import LogLevel, log
from nxdnkit.udpsocket import UDPSocket, UDPSocketError, lookup
from nxdnkit.utils import dump

NXCORE_PORT = 41300
BUFFER_LENGTH = 200
ICOM_LENGTH = 102
PAYLOAD_OFFSET = 40
PAYLOAD_LENGTH = 33
NXDN_FRAME_LENGTH = 43

_ICOM_HEADER = b"ICOM\x01\x01\x08\xe0"


def build_icom_packet(data: bytes) -> bytes:
    """Turn a 43-byte NXDND network frame into a 102-byte ICOM packet."""
    if len(data) < NXDN_FRAME_LENGTH:
        raise ValueError(f"frame must hold at least {NXDN_FRAME_LENGTH} bytes")

    packet = bytearray(ICOM_LENGTH)
    packet[0:8] = _ICOM_HEADER

    flags = data[9]
    if flags & 0x02 == 0x02:
        packet[37:40] = bytes([0x23, 0x02, 0x18])
    else:
        packet[37:40] = bytes([0x23, 0x1C if flags & 0x0C else 0x10, 0x21])

    packet[PAYLOAD_OFFSET:PAYLOAD_OFFSET + PAYLOAD_LENGTH] = data[10:10 + PAYLOAD_LENGTH]
    return bytes(packet)


def parse_icom_packet(packet: bytes) -> bytes | None:
    """Return the 33-byte NXDN payload of an ICOM packet, or None if it is not one."""
    if not packet.startswith(b"ICOM"):
        return None
    if len(packet) != ICOM_LENGTH:
        return None
    return bytes(packet[PAYLOAD_OFFSET:PAYLOAD_OFFSET + PAYLOAD_LENGTH])


class NXCoreNetwork:
    """UDP link to an NXCore server on its fixed port."""

    def __init__(self, address: str, debug: bool = False) -> None:
        if not address:
            raise ValueError("address must not be empty")
        self._hostname = address
        self._debug = debug
        self._socket = UDPSocket(NXCORE_PORT)
        try:
            self._address: str | None = lookup(address)
        except UDPSocketError:
            log(LogLevel.ERROR, f"Cannot find address for host {address}")
            self._address = None

    def open(self) -> None:
        """Open the link; raises UDPSocketError on failure."""
        log(LogLevel.MESSAGE, "Opening NXCore network connection")
        if self._address is None:
            raise UDPSocketError(f"Cannot find address for host {self._hostname}")
        self._socket.open()

    def write(self, data: bytes) -> bool:
        """Send a 43-byte NXDND frame to the server; return False on failure."""
        if self._address is None:
            return False
        packet = build_icom_packet(data)
        if self._debug:
            dump("NXCore Network Data Sent", packet, LogLevel.DEBUG)
        try:
            self._socket.write(packet, self._address, NXCORE_PORT)
        except UDPSocketError:
            return False
        return True

    def read(self) -> bytes:
        """Return a received 33-byte NXDN payload, or empty bytes."""
        try:
            result = self._socket.read(BUFFER_LENGTH)
        except UDPSocketError:
            return b""
        if result is None:
            return b""

        packet, host, port = result
        if host != self._address or port != NXCORE_PORT:
            log(
                LogLevel.MESSAGE,
                f"NXCore packet received from an invalid source, {self._address} != {host}"
                f" and/or {NXCORE_PORT} != {port}",
            )
            return b""

        payload = parse_icom_packet(packet)
        if payload is None:
            return b""

        if self._debug:
            dump("NXCore Network Data Received", packet, LogLevel.DEBUG)
        return payload

    def close(self) -> None:
        self._socket.close()
        log(LogLevel.MESSAGE, "Closing NXCore network connection")