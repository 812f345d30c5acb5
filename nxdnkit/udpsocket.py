"""Non-blocking IPv4 UDP socket."""

from __future__ import annotations

import select
import socket


class UDPSocketError(Exception):
    """Raised when a UDP socket operation fails."""


def lookup(hostname: str) -> str:
    """Resolve ``hostname`` to a dotted-quad IPv4 address.

    Numeric addresses are returned as they are. A name that cannot be
    resolved raises UDPSocketError.
    """
    try:
        return socket.inet_ntoa(socket.inet_aton(hostname))
    except OSError:
        pass
    try:
        return socket.gethostbyname(hostname)
    except OSError as exc:
        raise UDPSocketError(f"Cannot find address for host {hostname}") from exc


class UDPSocket:
    """A UDP socket that never blocks on read.

    With a non-zero ``port`` the socket is bound to that port, on
    ``address`` if one is given, otherwise on every interface.
    """

    def __init__(self, port: int = 0, address: str = "") -> None:
        self._port = port
        self._address = address
        self._sock: socket.socket | None = None

    def __enter__(self) -> UDPSocket:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def local_port(self) -> int:
        """The local port the socket is bound to, or 0 when not open."""
        if self._sock is None:
            return 0
        return self._sock.getsockname()[1]

    def open(self) -> None:
        """Create the socket and bind it when a port was given."""
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        except OSError as exc:
            raise UDPSocketError(f"Cannot create the UDP socket, err: {exc.errno}") from exc

        if self._port > 0:
            host = ""
            if self._address:
                try:
                    host = socket.inet_ntoa(socket.inet_aton(self._address))
                except OSError as exc:
                    sock.close()
                    raise UDPSocketError(
                        f"The local address is invalid - {self._address}"
                    ) from exc
                if host == "255.255.255.255":
                    sock.close()
                    raise UDPSocketError(f"The local address is invalid - {self._address}")

            try:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            except OSError as exc:
                sock.close()
                raise UDPSocketError(
                    f"Cannot set the UDP socket option, err: {exc.errno}"
                ) from exc

            try:
                sock.bind((host, self._port))
            except OSError as exc:
                sock.close()
                raise UDPSocketError(f"Cannot bind the UDP address, err: {exc.errno}") from exc

        self._sock = sock

    def _require_open(self) -> socket.socket:
        if self._sock is None:
            raise UDPSocketError("The UDP socket is not open")
        return self._sock

    def read(self, length: int) -> tuple[bytes, str, int] | None:
        """Receive one datagram of at most ``length`` bytes without blocking.

        Returns ``(data, host, port)``, or None when nothing is waiting.
        """
        if length <= 0:
            raise ValueError("length must be positive")
        sock = self._require_open()
        try:
            readable, _, _ = select.select([sock], [], [], 0)
        except (OSError, ValueError) as exc:
            raise UDPSocketError(f"Error returned from UDP select, err: {exc}") from exc
        if not readable:
            return None

        try:
            data, (host, port) = sock.recvfrom(length)
        except OSError as exc:
            raise UDPSocketError(f"Error returned from recvfrom, err: {exc.errno}") from exc
        if not data:
            raise UDPSocketError("Error returned from recvfrom, empty datagram")
        return data, host, port

    def write(self, data: bytes, address: str, port: int) -> None:
        """Send ``data`` as one datagram to ``address``:``port``."""
        if not data:
            raise ValueError("data must not be empty")
        sock = self._require_open()
        try:
            sent = sock.sendto(bytes(data), (address, port))
        except OSError as exc:
            raise UDPSocketError(f"Error returned from sendto, err: {exc.errno}") from exc
        if sent != len(data):
            raise UDPSocketError(f"Short write to {address}:{port}, {sent} of {len(data)}")

    def close(self) -> None:
        """Close the socket; closing twice is harmless."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None