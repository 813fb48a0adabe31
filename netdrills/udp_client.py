"""Send each line of standard input as a UDP datagram to a fixed server."""

from __future__ import annotations

import socket
import sys
from typing import Iterable, Optional, Sequence, Tuple

from netdrills.chat import BUFLEN

SERVER = "127.0.0.1"
PORT = 8888


def send_lines(
    sock: socket.socket,
    lines: Iterable[str],
    address: Tuple[str, int],
) -> int:
    """Send every line to ``address`` and return the number of datagrams sent.

    Lines longer than the read buffer go out in several datagrams.
    Socket errors propagate as OSError.
    """
    size = BUFLEN - 1
    sent = 0
    for line in lines:
        for start in range(0, len(line), size):
            sock.sendto(line[start:start + size].encode("utf-8"), address)
            sent += 1
    return sent


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read standard input and forward it to the server."""
    try:
        socket.inet_aton(SERVER)
    except OSError:
        print("inet_aton() failed", file=sys.stderr)
        return 1
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        print(f"Enter messages to send to {SERVER}:{PORT}")
        try:
            send_lines(sock, sys.stdin, (SERVER, PORT))
        except OSError as exc:
            print(f"sendto: {exc}", file=sys.stderr)
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())