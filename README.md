# tftpclient

A small interactive client for a TFTP-style file transfer server. It talks
UDP to a server (port 9091 by default) and can download files from it and
upload files to it.

## Installation

```
pip install .
```

## Usage

Start the interactive menu:

```
tftpclient
```

To talk to a server on another port:

```
tftpclient --port 6969
```

The menu reads one choice per line:

1. **Connect**: enter the server's IPv4 address. It must contain only digits
   and dots, with exactly three dots.
2. **Get**: enter a file name to download it from the server into a local
   file of the same name. An existing local file is overwritten.
3. **Put**: enter a file name to upload that local file to the server.
4. **Mode**: choose the transfer mode sent with uploads: `octet`,
   `netascii` or `normal`.
   - `octet` sends the file one byte per DATA packet.
   - `netascii` reads the file one byte at a time and sends it in blocks of
     up to 512 bytes.
   - `normal`, or no mode chosen, sends blocks of up to 512 bytes.
5. **Exit**: send the server an ERROR packet with error code 2 to say the
   client is leaving, then quit.

The menu also ends when its input runs out.

## Library use

The pieces behind the menu can also be used on their own:

- `tftpclient.packet.Packet` and `tftpclient.packet.Opcode` encode and decode
  the packets on the wire. Every packet has the same fixed size
  (`tftpclient.packet.PACKET_SIZE`); `Packet.encode()` raises `ValueError`
  when a field does not fit, and `Packet.decode()` raises `ValueError` for
  data of the wrong length.
- `tftpclient.client.TftpClient` holds the UDP socket and the server address.
  `connect()` checks the address with `validate_ip_address` and raises
  `InvalidAddressError` if it is not valid; `send()` and `receive()` move one
  packet at a time, and the client can be used as a context manager.
- `tftpclient.transfer.get_file(client, filename, out)` and
  `tftpclient.transfer.put_file(client, filename, mode, out)` run a whole
  download or upload over a connected client, writing progress messages to
  `out` (standard output by default), and return `True` on success.
  `read_size(mode)` gives the number of bytes read from the local file per
  read for a mode.
- `tftpclient.cli.main_menu(client, stdin, stdout)` runs the menu over any
  text streams.

## What it does not do

- It is only a client; there is no server in this package.
- Its packets use their own fixed-size layout and are not interchangeable
  with standard TFTP servers.
- There are no timeouts or retransmissions: a lost packet leaves a transfer
  waiting.

## Running the tests

```
pip install ".[test]"
pytest
```