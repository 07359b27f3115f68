"""UDP endpoint that talks to the transfer server."""

from __future__ import annotations

import socket

from .packet import PACKET_SIZE, Packet

DEFAULT_PORT = 9091


class InvalidAddressError(ValueError):
    """Raised when a server address is not a dotted IPv4 string."""


def validate_ip_address(address: str) -> bool:
    """Accept only digits and dots, with exactly three dots."""
    if any(ch not in "0123456789." for ch in address):
        return False
    return address.count(".") == 3


class TftpClient:
    """A UDP socket paired with the address of the server it talks to."""

    def __init__(self, port: int = DEFAULT_PORT, sock: socket.socket | None = None):
        self.port = port
        self.sock = sock if sock is not None else socket.socket(
            socket.AF_INET, socket.SOCK_DGRAM
        )
        self.server_address: tuple[str, int] | None = None

    def connect(self, address: str) -> None:
        """Set the server address, rejecting malformed ones."""
        address = address.strip()
        if not validate_ip_address(address):
            raise InvalidAddressError(f"Invalid ip address: {address!r}")
        self.server_address = (address, self.port)

    def send(self, packet: Packet) -> int:
        """Send one packet to the server and return the bytes sent."""
        if self.server_address is None:
            raise ConnectionError("not connected to a server")
        return self.sock.sendto(packet.encode(), self.server_address)

    def receive(self) -> Packet:
        """Wait for one packet; replies may come from a new server port."""
        data, sender = self.sock.recvfrom(PACKET_SIZE)
        self.server_address = sender
        return Packet.decode(data)

    def close(self) -> None:
        self.sock.close()

    def __enter__(self) -> TftpClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()