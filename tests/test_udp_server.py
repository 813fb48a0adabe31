import io
import socket

import pytest

from netdrills import udp_server


def test_format_datagram():
    assert (
        udp_server.format_datagram(b"hi", ("127.0.0.1", 5000))
        == "Received from 127.0.0.1:5000: hi"
    )


def test_format_datagram_keeps_trailing_newline():
    text = udp_server.format_datagram(b"line\n", ("10.0.0.2", 7))
    assert text.endswith(": line\n")


@pytest.fixture
def server_sock():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(0.5)
    yield sock
    sock.close()


def test_serve_prints_each_datagram(server_sock):
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as client:
        client.bind(("127.0.0.1", 0))
        client.sendto(b"first", server_sock.getsockname())
        client.sendto(b"second", server_sock.getsockname())
        client_address = client.getsockname()
        output = io.StringIO()
        count = udp_server.serve(server_sock, output)
    expected = "".join(
        udp_server.format_datagram(data, client_address) + "\n"
        for data in (b"first", b"second")
    )
    assert count == 2
    assert output.getvalue() == expected


def test_serve_returns_on_error_with_nothing_received(server_sock, capsys):
    output = io.StringIO()
    assert udp_server.serve(server_sock, output) == 0
    assert output.getvalue() == ""
    assert "recvfrom:" in capsys.readouterr().err


def test_serve_closed_socket():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.close()
    assert udp_server.serve(sock, io.StringIO()) == 0