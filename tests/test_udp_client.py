import socket

import pytest

from netdrills import udp_client


@pytest.fixture
def receiver():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2.0)
    yield sock
    sock.close()


@pytest.fixture
def sender():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    yield sock
    sock.close()


def test_send_lines_delivers_each_line(receiver, sender):
    lines = ["one\n", "two\n", "three\n"]
    count = udp_client.send_lines(sender, lines, receiver.getsockname())
    received = [receiver.recvfrom(2048)[0] for _ in range(count)]
    assert count == len(lines)
    assert received == [line.encode() for line in lines]


def test_send_lines_splits_long_lines(receiver, sender):
    line = "x" * 1000 + "\n"
    count = udp_client.send_lines(sender, [line], receiver.getsockname())
    received = [receiver.recvfrom(2048)[0] for _ in range(count)]
    assert count > 1
    assert all(len(piece) <= 511 for piece in received)
    assert b"".join(received) == line.encode()


def test_send_lines_nothing_to_send(sender):
    assert udp_client.send_lines(sender, [], ("127.0.0.1", 9)) == 0


def test_send_lines_closed_socket_raises():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.close()
    with pytest.raises(OSError):
        udp_client.send_lines(sock, ["hi\n"], ("127.0.0.1", 9))


def test_main_prints_prompt(monkeypatch, capsys):
    import io

    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert udp_client.main() == 0
    assert "Enter messages to send to 127.0.0.1:8888" in capsys.readouterr().out