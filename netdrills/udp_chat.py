"""A two-way UDP chat: lines from standard input go out, datagrams from anyone are shown."""

from __future__ import annotations

import socket
import sys
import threading
from typing import Iterable, Iterator, Optional, Sequence, TextIO, Tuple

from netdrills.chat import BUFLEN, USAGE
from netdrills.chat import parse_args as _parse_chat_args

_POLL_INTERVAL = 0.1


def parse_args(argv: Sequence[str]) -> Tuple[int, str, int]:
    """Turn ``<your_port> <peer_ip> <peer_port>`` into a tuple.

    Raises ValueError unless exactly three arguments are given.
    """
    return _parse_chat_args(argv)


def format_peer_message(data: bytes, address: Tuple[str, int]) -> str:
    """Render a received datagram the way the chat shows it."""
    host, port = address[0], address[1]
    text = data.decode("utf-8", errors="replace")
    return f"\n[Peer {host}:{port}]: {text}"


def _pieces(lines: Iterable[str]) -> Iterator[str]:
    """Yield input the way a bounded line reader hands it out."""
    size = BUFLEN - 1
    for line in lines:
        for start in range(0, len(line), size):
            yield line[start:start + size]


def _receive(
    sock: socket.socket,
    output: TextIO,
    stop: threading.Event,
) -> None:
    while not stop.is_set():
        try:
            data, address = sock.recvfrom(BUFLEN - 1)
        except socket.timeout:
            continue
        except OSError as exc:
            if not stop.is_set():
                print(f"recvfrom: {exc}", file=sys.stderr)
            return
        output.write(format_peer_message(data, address))
        output.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Chat with one peer over UDP using standard input and output."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        my_port, peer_ip, peer_port = parse_args(args)
    except ValueError:
        print(USAGE.format(prog="udp_chat"))
        return 1

    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.bind(("", my_port))
    except OSError as exc:
        print(f"bind: {exc}", file=sys.stderr)
        sock.close()
        return 1

    try:
        socket.inet_aton(peer_ip)
    except OSError:
        print("Invalid peer IP address", file=sys.stderr)
        sock.close()
        return 1

    peer_address = (peer_ip, peer_port)
    sock.settimeout(_POLL_INTERVAL)
    stop = threading.Event()
    receiver = threading.Thread(
        target=_receive, args=(sock, sys.stdout, stop), daemon=True
    )
    receiver.start()

    try:
        for piece in _pieces(sys.stdin):
            try:
                sock.sendto(piece.encode("utf-8"), peer_address)
            except OSError as exc:
                print(f"sendto: {exc}", file=sys.stderr)
                break
    except KeyboardInterrupt:
        pass
    finally:
        stop.set()
        receiver.join(timeout=1.0)
        sock.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())