"""Downloading and uploading files over an established TftpClient."""

from __future__ import annotations

import dataclasses
import sys
from collections.abc import Iterator
from typing import BinaryIO, TextIO

from .client import TftpClient
from .packet import DATA_SIZE, Opcode, Packet

_BYTE_MODES = frozenset({"octet", "netascii"})


def read_size(mode: str) -> int:
    """Number of bytes read from the local file per read for a transfer mode."""
    return 1 if mode in _BYTE_MODES else DATA_SIZE


def _blocks(stream: BinaryIO, mode: str) -> Iterator[bytes]:
    """Yield the payloads of the DATA packets that carry ``stream``."""
    size = read_size(mode)
    if mode != "netascii":
        while chunk := stream.read(size):
            yield chunk
        return
    # netascii reads byte by byte but gathers full blocks before sending.
    block = bytearray()
    seen_any = False
    while byte := stream.read(size):
        seen_any = True
        if len(block) == DATA_SIZE:
            yield bytes(block)
            block.clear()
        block += byte
    if seen_any:
        yield bytes(block)


def _open_destination(filename: str, out: TextIO) -> BinaryIO:
    try:
        handle = open(filename, "xb")
    except FileExistsError:
        handle = open(filename, "wb")
        print("File is already present. Clearing the previous content.", file=out)
    else:
        print("Success : Client side file has been created.", file=out)
    return handle


def get_file(client: TftpClient, filename: str, out: TextIO | None = None) -> bool:
    """Fetch ``filename`` from the server into a local file of the same name.

    Returns True once the whole file has been received.
    """
    out = out if out is not None else sys.stdout
    try:
        client.send(Packet(opcode=Opcode.RRQ, filename=filename))
    except OSError:
        print("Failure : Request not sent", file=out)
        return False
    print("Request sent", file=out)

    reply = client.receive()
    if reply.opcode == Opcode.ERROR:
        print(f"Failure : {reply.error_msg}", file=out)
        return False
    print(f"Success : {reply.error_msg}", file=out)

    with _open_destination(filename, out) as destination:
        try:
            client.send(Packet(opcode=Opcode.ACK, block_number=reply.block_number))
        except OSError:
            print("Failure : Acknowledgement not sent", file=out)
            return False
        print("Success : Acknowledgement sent", file=out)

        block_number = 0
        while True:
            packet = client.receive()
            if packet.opcode == Opcode.DATA:
                destination.write(packet.data)
                packet = dataclasses.replace(packet, block_number=block_number & 0xFFFF)
                block_number += 1
                print(f"Success : Packet {packet.block_number} received", file=out)
                client.send(packet)
            elif packet.opcode == Opcode.ERROR and packet.error_code == 0:
                break

    try:
        client.send(packet)
    except OSError:
        print("Failure : Acknowledgement not sent", file=out)
        return False
    print("Success : Acknowledgement sent", file=out)
    print("Success : File received", file=out)
    return True


def put_file(
    client: TftpClient, filename: str, mode: str, out: TextIO | None = None
) -> bool:
    """Send the local file ``filename`` to the server using ``mode``.

    Returns True once the transfer has been completed.
    """
    out = out if out is not None else sys.stdout
    try:
        client.send(Packet(opcode=Opcode.WRQ, filename=filename, mode=mode))
    except OSError:
        print("Failure : Request not sent", file=out)
        return False
    print("Request sent", file=out)

    try:
        source = open(filename, "rb")
    except OSError:
        print("Failure : File not found", file=out)
        return False
    print("Success : Client side file has been opened.", file=out)

    with source:
        for block_number, payload in enumerate(_blocks(source, mode)):
            client.send(
                Packet(
                    opcode=Opcode.DATA,
                    block_number=block_number & 0xFFFF,
                    data=payload,
                )
            )
            reply = client.receive()
            print(f"INFO: Packet {reply.block_number} sent", file=out)

    client.send(Packet(opcode=Opcode.ERROR, error_code=0))
    print("INFO: File transfer completed", file=out)
    return True