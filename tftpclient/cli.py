"""Interactive menu for fetching and sending files."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import TextIO

from .client import DEFAULT_PORT, InvalidAddressError, TftpClient
from .packet import Opcode, Packet
from .transfer import get_file, put_file

MENU = (
    "Enter the option you want execute in this project : \n"
    "1. Connect\n2. Get\n3. Put\n4. Mode\n5. Exit"
)
MODE_MENU = "Select the mode you want to use : \n1. Octet\n2. Netascii\n3. Normal"
MODES = {1: "octet", 2: "netascii", 3: "normal"}

# Error code that tells the server the client is going away.
DISCONNECT_CODE = 2


@dataclass
class _Session:
    client: TftpClient
    stdin: TextIO
    stdout: TextIO
    filename: str = ""
    mode: str = ""

    def say(self, text: str, end: str = "\n") -> None:
        print(text, end=end, file=self.stdout)

    def read_line(self) -> str | None:
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def read_number(self) -> int | None:
        line = self.read_line()
        if line is None:
            return None
        try:
            return int(line.strip())
        except ValueError:
            return 0

    def read_filename(self) -> bool:
        self.say("Enter the file name : ", end="")
        line = self.read_line()
        if line is None:
            return False
        if line:
            self.filename = line
        return True

    def connect(self) -> bool:
        self.say("Enter the ip address you want to connect : ", end="")
        line = self.read_line()
        if line is None:
            return False
        try:
            self.client.connect(line)
        except InvalidAddressError:
            self.say("Invalid ip address")
            self.say("Connection failed")
        else:
            self.say("Connection successfull")
        return True

    def select_mode(self) -> bool:
        self.say(MODE_MENU)
        choice = self.read_number()
        if choice is None:
            return False
        self.mode = MODES.get(choice, self.mode)
        return True

    def transfer(self, upload: bool) -> bool:
        if not self.read_filename():
            return False
        try:
            if upload:
                put_file(self.client, self.filename, self.mode, self.stdout)
            else:
                get_file(self.client, self.filename, self.stdout)
        except (OSError, ValueError) as exc:
            self.say(f"Failure : {exc}")
        return True

    def disconnect(self) -> None:
        self.say("Exiting the program...")
        try:
            self.client.send(Packet(opcode=Opcode.ERROR, error_code=DISCONNECT_CODE))
        except (OSError, ValueError):
            pass


def main_menu(
    client: TftpClient, stdin: TextIO | None = None, stdout: TextIO | None = None
) -> None:
    """Run the menu until the user exits or the input ends."""
    session = _Session(
        client,
        stdin if stdin is not None else sys.stdin,
        stdout if stdout is not None else sys.stdout,
    )
    while True:
        session.say(MENU)
        option = session.read_number()
        if option is None:
            return
        if option == 1:
            keep_going = session.connect()
        elif option == 2:
            keep_going = session.transfer(upload=False)
        elif option == 3:
            keep_going = session.transfer(upload=True)
        elif option == 4:
            keep_going = session.select_mode()
        elif option == 5:
            session.disconnect()
            return
        else:
            session.say("Invalid option please anyone of the option above.")
            keep_going = True
        if not keep_going:
            return


def main(argv: list[str] | None = None) -> int:
    """Start the interactive client."""
    parser = argparse.ArgumentParser(description="Interactive TFTP client.")
    parser.add_argument(
        "--port", type=int, default=DEFAULT_PORT, help="server port to talk to"
    )
    args = parser.parse_args(argv)
    try:
        client = TftpClient(port=args.port)
    except OSError as exc:
        print(f"Socket creation failed: {exc}", file=sys.stderr)
        return 1
    with client:
        main_menu(client, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())