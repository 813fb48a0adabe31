"""A UDP chat peer driven by a small idle/receiving/sending state machine."""

from __future__ import annotations

import enum
import re
import socket
import sys
import threading
import time
from typing import Iterable, Iterator, Optional, Sequence, TextIO, Tuple

from netdrills.buffers import BufferEmpty, BufferFull, CircularBuffer, MessageQueue

BUFLEN = 512
USAGE = "Usage: {prog} <your_port> <peer_ip> <peer_port>"

_POLL_INTERVAL = 0.1
_IDLE_PAUSE = 0.001


class ChatState(enum.Enum):
    """What the chat loop will do on its next step."""

    IDLE = enum.auto()
    RECEIVING = enum.auto()
    SENDING = enum.auto()


def _chunks(line: str, size: int) -> Iterator[str]:
    """Split ``line`` into pieces of at most ``size`` characters."""
    for start in range(0, len(line), size):
        yield line[start:start + size]


class ChatPeer:
    """One end of a UDP conversation with a single fixed peer."""

    def __init__(self, my_port: int, peer_ip: str, peer_port: int) -> None:
        try:
            socket.inet_aton(peer_ip)
        except OSError as exc:
            raise ValueError(f"invalid peer IP address: {peer_ip!r}") from exc
        self.peer_address: Tuple[str, int] = (peer_ip, peer_port)
        self.recv_buf = CircularBuffer()
        self.send_queue = MessageQueue()
        self.state = ChatState.IDLE
        self._message = ""
        self._closed = threading.Event()
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            self._sock.bind(("", my_port))
        except OSError:
            self._sock.close()
            raise
        self._sock.settimeout(_POLL_INTERVAL)

    @property
    def address(self) -> Tuple[str, int]:
        """The local address the peer's socket is bound to."""
        return self._sock.getsockname()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def receive_loop(self) -> None:
        """Store incoming datagrams in the receive buffer until closed.

        Datagrams arriving while the buffer is full are dropped.
        """
        while not self._closed.is_set():
            try:
                data, _ = self._sock.recvfrom(BUFLEN - 1)
            except socket.timeout:
                continue
            except OSError:
                if self._closed.is_set():
                    return
                continue
            if data:
                try:
                    self.recv_buf.push(data.decode("utf-8", errors="replace"))
                except BufferFull:
                    pass

    def input_loop(self, stream: Iterable[str]) -> None:
        """Queue every line read from ``stream`` for sending."""
        for line in stream:
            for piece in _chunks(line, BUFLEN - 1):
                self.send_queue.enqueue(piece)

    def step(self, output: TextIO) -> ChatState:
        """Advance the state machine by one transition and return the new state."""
        if self.state is ChatState.IDLE:
            try:
                self._message = self.recv_buf.pop()
                self.state = ChatState.RECEIVING
            except BufferEmpty:
                try:
                    self._message = self.send_queue.dequeue()
                    self.state = ChatState.SENDING
                except BufferEmpty:
                    pass
        elif self.state is ChatState.RECEIVING:
            output.write(f"[Peer]: {self._message}")
            output.flush()
            self.state = ChatState.IDLE
        elif self.state is ChatState.SENDING:
            self._sock.sendto(self._message.encode("utf-8"), self.peer_address)
            self.state = ChatState.IDLE
        return self.state

    def run(self, stream: Iterable[str], output: TextIO) -> None:
        """Read input and network traffic in the background and drive the loop until closed."""
        receiver = threading.Thread(target=self.receive_loop, daemon=True)
        reader = threading.Thread(target=self.input_loop, args=(stream,), daemon=True)
        receiver.start()
        reader.start()
        try:
            while not self._closed.is_set():
                before = self.state
                try:
                    after = self.step(output)
                except OSError:
                    if self._closed.is_set():
                        break
                    raise
                if before is ChatState.IDLE and after is ChatState.IDLE:
                    time.sleep(_IDLE_PAUSE)
        finally:
            receiver.join(timeout=1.0)

    def close(self) -> None:
        """Stop the loops and release the socket."""
        if not self._closed.is_set():
            self._closed.set()
            self._sock.close()

    def __enter__(self) -> "ChatPeer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def parse_args(argv: Sequence[str]) -> Tuple[int, str, int]:
    """Turn ``<your_port> <peer_ip> <peer_port>`` into a tuple."""
    if len(argv) != 3:
        raise ValueError("expected exactly three arguments")
    my_port, peer_ip, peer_port = argv
    return _atoi(my_port), peer_ip, _atoi(peer_port)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a chat peer on standard input and output."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        my_port, peer_ip, peer_port = parse_args(args)
    except ValueError:
        print(USAGE.format(prog="chat"))
        return 1
    try:
        peer = ChatPeer(my_port, peer_ip, peer_port)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"bind: {exc}", file=sys.stderr)
        return 1
    with peer:
        try:
            peer.run(sys.stdin, sys.stdout)
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())