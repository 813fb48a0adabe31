"""A UDP server that prints every datagram it receives."""

from __future__ import annotations

import socket
import sys
from typing import Optional, Sequence, TextIO, Tuple

from netdrills.chat import BUFLEN

PORT = 8888


def format_datagram(data: bytes, address: Tuple[str, int]) -> str:
    """Render a received datagram together with its sender."""
    host, port = address[0], address[1]
    text = data.decode("utf-8", errors="replace")
    return f"Received from {host}:{port}: {text}"


def serve(sock: socket.socket, output: TextIO) -> int:
    """Print datagrams from ``sock`` until receiving fails; return how many arrived."""
    received = 0
    while True:
        try:
            data, address = sock.recvfrom(BUFLEN)
        except OSError as exc:
            print(f"recvfrom: {exc}", file=sys.stderr)
            return received
        print(format_datagram(data, address), file=output)
        output.flush()
        received += 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Listen on the fixed port and print what arrives."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.bind(("", PORT))
    except OSError as exc:
        print(f"bind: {exc}", file=sys.stderr)
        sock.close()
        return 1
    print(f"UDP server listening on port {PORT}...")
    try:
        serve(sock, sys.stdout)
    except KeyboardInterrupt:
        pass
    finally:
        sock.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())