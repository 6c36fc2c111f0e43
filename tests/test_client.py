import socket

import pytest

from mjbase.client import ClientSocket


@pytest.fixture
def pair():
    left, right = socket.socketpair()
    client = ClientSocket(sock=left)
    peer = ClientSocket(sock=right)
    yield client, peer, right
    client.close()
    peer.close()


def test_send_text(pair):
    client, _, raw = pair
    client.send_text("/ready\n")
    assert raw.recv(64) == b"/ready\n"


def test_recv_line_stops_at_newline(pair):
    client, _, raw = pair
    raw.sendall(b"/ask throw\n/next")
    assert client.recv_line() == "/ask throw\n"


def test_recv_line_at_end_of_stream(pair):
    client, peer, raw = pair
    raw.sendall(b"abc")
    peer.close()
    assert client.recv_line() == "abc"


def test_floats_round_trip(pair):
    client, peer, _ = pair
    client.send_floats([1.5, -2.0, 0.25])
    assert peer.recv_floats(3) == [1.5, -2.0, 0.25]


def test_int_round_trip_and_wire_bytes(pair):
    client, peer, raw = pair
    client.send_int(-7)
    assert peer.recv_int() == -7
    client.send_int(1)
    assert raw.recv(4) == b"\x01\x00\x00\x00"


def test_recv_floats_on_closed_stream(pair):
    client, peer, raw = pair
    raw.sendall(b"\x00\x00")
    peer.close()
    with pytest.raises(ConnectionError):
        client.recv_floats(1)


def test_unconnected_socket_raises():
    with pytest.raises(OSError):
        ClientSocket().send_text("x")


def test_connect_to_server():
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    host, port = server.getsockname()
    with ClientSocket(host, port) as client:
        conn, _ = server.accept()
        conn.sendall(b"/start 0 1\n")
        assert client.recv_line() == "/start 0 1\n"
        conn.close()
    server.close()