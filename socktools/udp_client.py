"""An interactive UDP client that sends typed lines and prints what comes back."""

from __future__ import annotations

import io
import select
import socket
import sys

RECEIVE_SIZE = 4096
POLL_INTERVAL = 0.1
USAGE = "usage: udp_client hostname port"


class UdpClient:
    """A UDP socket connected to one remote host and port."""

    def __init__(self, host, port):
        family, socktype, proto, _, sockaddr = socket.getaddrinfo(
            host, port, 0, socket.SOCK_DGRAM
        )[0]
        self.address, self.service = socket.getnameinfo(
            sockaddr, socket.NI_NUMERICHOST
        )
        self._sock = socket.socket(family, socktype, proto)
        try:
            self._sock.connect(sockaddr)
        except OSError:
            self._sock.close()
            raise

    def send(self, data):
        """Send *data* (text or bytes) as one datagram; return the bytes sent."""
        payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        return self._sock.send(payload)

    def receive(self, timeout=None):
        """Return the next datagram, or None if none arrives within *timeout*.

        A *timeout* of None waits without limit. An empty datagram, or an
        error reported by the peer, raises ConnectionError.
        """
        self._sock.settimeout(timeout)
        try:
            data = self._sock.recv(RECEIVE_SIZE)
        except (TimeoutError, BlockingIOError):
            return None
        finally:
            if self._sock.fileno() != -1:
                self._sock.settimeout(None)
        if not data:
            raise ConnectionError("connection closed by peer")
        return data

    def close(self):
        """Close the socket; closing twice is harmless."""
        self._sock.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def _stdin_fileno(stdin):
    try:
        return stdin.fileno()
    except (AttributeError, OSError, ValueError, io.UnsupportedOperation):
        return None


def _wait_for_input(client, stdin, timeout):
    """Return whether the socket and the input are ready to be read."""
    sock = client._sock
    fd = _stdin_fileno(stdin)
    if fd is None or sys.platform == "win32":
        readable, _, _ = select.select([sock], [], [], timeout)
        if fd is not None and stdin is sys.stdin and sys.platform == "win32":
            import msvcrt

            return bool(readable), msvcrt.kbhit()
        return bool(readable), True
    readable, _, _ = select.select([sock, fd], [], [], timeout)
    return sock in readable, fd in readable


def run(client, stdin=None, stdout=None):
    """Relay lines from *stdin* to *client* and print its replies to *stdout*.

    Stops at the end of input or when the peer closes the connection.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    stdout.write("Connected.\n")
    stdout.write("To send data, enter text followed by enter.\n")

    while True:
        socket_ready, input_ready = _wait_for_input(client, stdin, POLL_INTERVAL)

        if socket_ready:
            try:
                data = client.receive(0)
            except ConnectionError:
                stdout.write("Connection closed by peer.\n")
                break
            if data is not None:
                text = data.decode("utf-8", errors="replace")
                stdout.write(f"Received ({len(data)} bytes): {text}")

        if input_ready:
            line = stdin.readline()
            if not line:
                break
            stdout.write(f"Sending: {line}")
            sent = client.send(line)
            stdout.write(f"Sent {sent} bytes.\n")
        stdout.flush()


def main(argv=None):
    """Connect to the host and port given on the command line and relay input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print(USAGE, file=sys.stderr)
        return 1
    host, port = args[0], args[1]

    print("Configuring remote address...")
    try:
        client = UdpClient(host, port)
    except socket.gaierror as exc:
        print(f"getaddrinfo() failed. ({exc.errno})", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"connect() failed. ({exc.errno})", file=sys.stderr)
        return 1
    print(f"Remote address is: {client.address} {client.service}")
    print("Creating socket...")
    print("Connecting...")

    with client:
        try:
            run(client)
        except KeyboardInterrupt:
            pass
        print("Closing socket...")
    print("Finished.")
    return 0