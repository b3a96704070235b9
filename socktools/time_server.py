"""A one-shot TCP server that answers a single HTTP request with the local time."""

from __future__ import annotations

import argparse
import enum
import socket
import sys

from socktools.clock import ctime_string

DEFAULT_PORT = 8080
BACKLOG = 10
REQUEST_SIZE = 1024

RESPONSE_HEADER = (
    b"HTTP/1.1 200 OK\r\n"
    b"Connection: close\r\n"
    b"Content-Type: text/plain\r\n\r\n"
    b"Local time is: "
)


class AddressMode(enum.Enum):
    """Address family the listener is bound with."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"
    DUAL = "dual"

    @property
    def family(self):
        return socket.AF_INET if self is AddressMode.IPV4 else socket.AF_INET6


def build_response(timestamp=None):
    """Return the complete response bytes for *timestamp* (default now)."""
    return RESPONSE_HEADER + ctime_string(timestamp).encode("ascii")


def create_listener(mode=AddressMode.IPV4, port=DEFAULT_PORT, host=None):
    """Create, bind and start a listening TCP socket.

    In dual mode the socket is IPv6 with IPv6-only turned off, so IPv4
    clients are accepted as mapped addresses.
    """
    mode = AddressMode(mode)
    family, socktype, proto, _, sockaddr = socket.getaddrinfo(
        host, port, mode.family, socket.SOCK_STREAM, 0, socket.AI_PASSIVE
    )[0]
    sock = socket.socket(family, socktype, proto)
    try:
        if mode is AddressMode.DUAL:
            sock.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_V6ONLY, 0)
        sock.bind(sockaddr)
        sock.listen(BACKLOG)
    except OSError:
        sock.close()
        raise
    return sock


def serve_once(listener, timestamp=None, out=None):
    """Accept one client, answer it with the time and close it.

    Progress is written to *out* (default stdout). Returns the client's
    numeric address.
    """
    out = sys.stdout if out is None else out
    print("Waiting for connection...", file=out)
    conn, client_address = listener.accept()
    with conn:
        host = socket.getnameinfo(client_address, socket.NI_NUMERICHOST)[0]
        print(f"Client is connected... {host}", file=out)

        print("Reading request...", file=out)
        request = conn.recv(REQUEST_SIZE)
        print(f"Received {len(request)} bytes.", file=out)

        print("Sending response...", file=out)
        for part in (RESPONSE_HEADER, ctime_string(timestamp).encode("ascii")):
            sent = conn.send(part)
            print(f"Sent {sent} of {len(part)} bytes.", file=out)

        print("Closing connection...", file=out)
    return host


def main(argv=None):
    """Serve the local time to a single client."""
    parser = argparse.ArgumentParser(
        prog="time-server", description="Answer one HTTP request with the local time."
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in AddressMode],
        default=AddressMode.IPV4.value,
    )
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    print("Configuring local address...")
    print("Creating socket...")
    print("Binding socket to local address...")
    try:
        listener = create_listener(AddressMode(args.mode), args.port)
    except OSError as exc:
        print(f"listener setup failed. ({exc.errno})", file=sys.stderr)
        return 1
    print("Listening...")

    with listener:
        try:
            serve_once(listener)
        except OSError as exc:
            print(f"accept() failed. ({exc.errno})", file=sys.stderr)
            return 1
        print("Closing listening socket...")

    print("Finished.")
    return 0