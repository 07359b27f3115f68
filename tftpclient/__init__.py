"""Interactive client, packet codec and transfers for a TFTP-style UDP file server."""

__version__ = "0.1.0"