"""UDP datagram tools: one-shot send and receive, and an upper-casing echo server."""

from __future__ import annotations

import argparse
import socket
import sys
from dataclasses import dataclass

DEFAULT_PORT = 8080
DEFAULT_HOST = "127.0.0.1"
DEFAULT_MESSAGE = "Hello World"
RECEIVE_SIZE = 1024


@dataclass(frozen=True)
class Datagram:
    """A received datagram and the numeric address it came from."""

    data: bytes
    host: str
    port: str

    @property
    def text(self):
        """The payload decoded for display."""
        return self.data.decode("utf-8", errors="replace")


def to_upper(data):
    """Return *data* with ASCII letters upper-cased and every other byte kept."""
    return bytes(data).upper()


def bind_udp(port=DEFAULT_PORT, host=None):
    """Create an IPv4 UDP socket bound to *host* (default all) and *port*."""
    family, socktype, proto, _, sockaddr = socket.getaddrinfo(
        host, port, socket.AF_INET, socket.SOCK_DGRAM, 0, socket.AI_PASSIVE
    )[0]
    sock = socket.socket(family, socktype, proto)
    try:
        sock.bind(sockaddr)
    except OSError:
        sock.close()
        raise
    return sock


def _numeric_name(address):
    host, service = socket.getnameinfo(
        address, socket.NI_NUMERICHOST | socket.NI_NUMERICSERV
    )
    return host, service


def send_message(host=DEFAULT_HOST, port=DEFAULT_PORT, message=DEFAULT_MESSAGE, out=None):
    """Send *message* as one datagram to *host*:*port*.

    Progress is written to *out* (default stdout). Returns the number of
    bytes sent.
    """
    out = sys.stdout if out is None else out
    payload = message.encode("utf-8") if isinstance(message, str) else bytes(message)

    print("Configuring remote address...", file=out)
    family, socktype, proto, _, sockaddr = socket.getaddrinfo(
        host, port, 0, socket.SOCK_DGRAM
    )[0]
    address, service = _numeric_name(sockaddr)
    print(f"Remote address is: {address} {service}", file=out)

    print("Creating socket...", file=out)
    with socket.socket(family, socktype, proto) as sock:
        print(f"Sending: {payload.decode('utf-8', errors='replace')}", file=out)
        sent = sock.sendto(payload, sockaddr)
        print(f"Sent {sent} bytes.", file=out)
    return sent


def receive_one(sock, bufsize=RECEIVE_SIZE):
    """Wait for one datagram on *sock* and return it with its sender."""
    data, address = sock.recvfrom(bufsize)
    host, service = _numeric_name(address)
    return Datagram(data, host, service)


def serve_toupper(sock, max_datagrams=None):
    """Answer each datagram on *sock* with its upper-cased copy.

    Runs until *max_datagrams* have been answered, or forever when it is
    None. An empty datagram raises ConnectionError. Returns the number of
    datagrams answered.
    """
    served = 0
    while max_datagrams is None or served < max_datagrams:
        data, address = sock.recvfrom(RECEIVE_SIZE)
        if not data:
            raise ConnectionError("connection closed")
        sock.sendto(to_upper(data), address)
        served += 1
    return served


def _listen_parser(prog, description):
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--host", default=None)
    return parser


def _open_listener(args):
    print("Configuring local address...")
    print("Creating socket...")
    print("Binding socket to local address...")
    try:
        return bind_udp(args.port, args.host)
    except OSError as exc:
        print(f"bind() failed. ({exc.errno})", file=sys.stderr)
        return None


def recvfrom_main(argv=None):
    """Receive a single datagram and report it with its sender."""
    args = _listen_parser("udp-recvfrom", "Receive one UDP datagram.").parse_args(argv)
    sock = _open_listener(args)
    if sock is None:
        return 1
    with sock:
        datagram = receive_one(sock)
        print(f"Received ({len(datagram.data)} bytes): {datagram.text}")
        print(f"Remote address is: {datagram.host} {datagram.port}")
    print("Finished.")
    return 0


def sendto_main(argv=None):
    """Send the greeting datagram to the given host and port."""
    parser = argparse.ArgumentParser(prog="udp-sendto", description="Send one UDP datagram.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--message", default=DEFAULT_MESSAGE)
    args = parser.parse_args(argv)
    try:
        send_message(args.host, args.port, args.message)
    except OSError as exc:
        print(f"sendto() failed. ({exc.errno})", file=sys.stderr)
        return 1
    print("Finished.")
    return 0


def serve_toupper_main(argv=None):
    """Run the upper-casing UDP echo server."""
    args = _listen_parser(
        "udp-serve-toupper", "Echo UDP datagrams back in upper case."
    ).parse_args(argv)
    sock = _open_listener(args)
    if sock is None:
        return 1
    with sock:
        print("Waiting for connections...")
        try:
            serve_toupper(sock)
        except ConnectionError:
            print("connection closed. (0)", file=sys.stderr)
            return 1
        except OSError as exc:
            print(f"connection closed. ({exc.errno})", file=sys.stderr)
            return 1
        except KeyboardInterrupt:
            pass
        print("Closing listening socket...")
    print("Finished.")
    return 0