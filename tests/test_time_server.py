import io
import socket
import threading

import pytest

from socktools.clock import ctime_string
from socktools.time_server import (
    AddressMode,
    build_response,
    create_listener,
    main,
    serve_once,
)

HEADER = (
    b"HTTP/1.1 200 OK\r\n"
    b"Connection: close\r\n"
    b"Content-Type: text/plain\r\n\r\n"
    b"Local time is: "
)


def _fetch(port, request):
    with socket.create_connection(("127.0.0.1", port), timeout=5) as client:
        client.sendall(request)
        chunks = []
        while True:
            chunk = client.recv(4096)
            if not chunk:
                break
            chunks.append(chunk)
    return b"".join(chunks)


def test_build_response_layout():
    response = build_response(1_000_000_000)
    assert response.startswith(HEADER)
    assert response[len(HEADER):] == ctime_string(1_000_000_000).encode("ascii")


def test_address_mode_from_value():
    assert AddressMode("dual") is AddressMode.DUAL
    assert AddressMode.IPV4.family == socket.AF_INET


def test_create_listener_ipv4():
    with create_listener(AddressMode.IPV4, 0, "127.0.0.1") as listener:
        host, port = listener.getsockname()
        assert host == "127.0.0.1"
        assert port > 0
        assert listener.family == socket.AF_INET


def test_create_listener_port_in_use():
    with create_listener(AddressMode.IPV4, 0, "127.0.0.1") as first:
        port = first.getsockname()[1]
        with pytest.raises(OSError):
            create_listener(AddressMode.IPV4, port, "127.0.0.1")


def test_serve_once_round_trip():
    request = b"GET / HTTP/1.1\r\n\r\n"
    out = io.StringIO()
    result = {}
    with create_listener(AddressMode.IPV4, 0, "127.0.0.1") as listener:
        port = listener.getsockname()[1]
        worker = threading.Thread(
            target=lambda: result.update(host=serve_once(listener, 1_000_000_000, out))
        )
        worker.start()
        body = _fetch(port, request)
        worker.join(timeout=5)
    assert body == build_response(1_000_000_000)
    assert result["host"] == "127.0.0.1"
    log = out.getvalue().splitlines()
    assert log[0] == "Waiting for connection..."
    assert "Client is connected... 127.0.0.1" in log
    assert f"Received {len(request)} bytes." in log
    assert f"Sent {len(HEADER)} of {len(HEADER)} bytes." in log
    assert log[-1] == "Closing connection..."


def test_main_rejects_unknown_mode():
    with pytest.raises(SystemExit) as info:
        main(["--mode", "ipx"])
    assert info.value.code == 2


def test_main_reports_bind_failure(capsys):
    with create_listener(AddressMode.IPV4, 0) as occupied:
        port = occupied.getsockname()[1]
        assert main(["--port", str(port)]) == 1
    captured = capsys.readouterr()
    assert "failed." in captured.err
    assert captured.out.startswith("Configuring local address...")