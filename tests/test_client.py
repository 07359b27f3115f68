import socket

import pytest

from tftpclient.client import InvalidAddressError, TftpClient, validate_ip_address
from tftpclient.packet import PACKET_SIZE, Opcode, Packet


@pytest.fixture
def server():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(5)
    yield sock
    sock.close()


@pytest.fixture
def client(server):
    c = TftpClient(port=server.getsockname()[1])
    c.sock.settimeout(5)
    yield c
    c.close()


@pytest.mark.parametrize(
    "address, expected",
    [
        ("127.0.0.1", True),
        ("192.168.1.10", True),
        ("1.2.3", False),
        ("1.2.3.4.5", False),
        ("1.2.3.a", False),
        ("1.2.3.4 ", False),
        ("", False),
    ],
)
def test_validate_ip_address(address, expected):
    assert validate_ip_address(address) is expected


def test_connect_sets_server_address(client, server):
    client.connect("127.0.0.1")
    assert client.server_address == ("127.0.0.1", server.getsockname()[1])


def test_connect_rejects_invalid_address(client):
    with pytest.raises(InvalidAddressError):
        client.connect("localhost")
    assert client.server_address is None


def test_invalid_address_error_is_value_error(client):
    with pytest.raises(ValueError):
        client.connect("1.2")


def test_send_without_connect(client):
    with pytest.raises(ConnectionError):
        client.send(Packet(opcode=Opcode.ACK))


def test_send_delivers_encoded_packet(client, server):
    client.connect("127.0.0.1")
    packet = Packet(opcode=Opcode.RRQ, filename="a.txt", mode="octet")
    assert client.send(packet) == PACKET_SIZE
    data, _ = server.recvfrom(PACKET_SIZE * 2)
    assert Packet.decode(data) == packet


def test_receive_decodes_and_tracks_sender(client, server):
    client.connect("127.0.0.1")
    client.send(Packet(opcode=Opcode.ACK))
    _, client_addr = server.recvfrom(PACKET_SIZE)

    reply_sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        reply_sock.bind(("127.0.0.1", 0))
        reply = Packet(opcode=Opcode.DATA, block_number=3, data=b"payload")
        reply_sock.sendto(reply.encode(), client_addr)
        assert client.receive() == reply
        assert client.server_address == reply_sock.getsockname()
    finally:
        reply_sock.close()


def test_uses_given_socket():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    with TftpClient(port=9091, sock=sock) as c:
        assert c.sock is sock
    assert sock.fileno() == -1


def test_close_closes_socket(server):
    c = TftpClient(port=server.getsockname()[1])
    c.close()
    assert c.sock.fileno() == -1