# socktools

Small command-line networking tools built on the standard `socket` module,
together with the functions behind them for use from Python code.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `socktools-time` | Prints `Local time is: ...` with the current local time in `ctime` form. |
| `socktools-socket-ready` | Opens and closes a TCP socket and prints `Ready to use socket API.`; prints `Failed to initialize.` and exits with status 1 if it cannot. |
| `socktools-addresses` | Lists every IPv4 and IPv6 address of every network interface, one tab-separated line each: interface name, `IPv4` or `IPv6`, address. |
| `socktools-time-server [--mode ipv4\|ipv6\|dual] [--port N]` | Listens on TCP port 8080 (by default, IPv4), answers one client with an HTTP response carrying the local time, then exits. |
| `socktools-udp-recvfrom [--host H] [--port N]` | Binds UDP port 8080 on all IPv4 addresses, receives one datagram and prints it with the sender's numeric address and port. |
| `socktools-udp-sendto [--host H] [--port N] [--message TEXT]` | Sends one datagram, by default `Hello World` to `127.0.0.1:8080`. |
| `socktools-udp-toupper [--host H] [--port N]` | Serves on UDP port 8080, sending each datagram back with its ASCII letters upper-cased. Runs until interrupted; an empty datagram ends it with status 1. |
| `socktools-udp-client hostname port` | Interactive UDP client: sends each line typed and prints each datagram that comes back. |

All commands print their progress (`Creating socket...`, `Binding socket to
local address...` and so on) to standard output and report socket errors on
standard error with a non-zero exit status.

### Trying the UDP tools together

In one terminal:

```
socktools-udp-toupper
```

In another:

```
socktools-udp-client 127.0.0.1 8080
```

Each line you type is sent with its newline and comes back in upper case.
The client stops at the end of input (Ctrl-D) or when the peer closes the
connection or refuses it (for example, when no server is listening).

### Time server

```
socktools-time-server
```

Then open `http://127.0.0.1:8080/` in a browser or with any HTTP client. The
server reads up to 1024 bytes of the request without looking at it, answers
with `HTTP/1.1 200 OK`, `Connection: close`, `Content-Type: text/plain` and
the body `Local time is: ...`, and shuts down.

`--mode` chooses how the listener is bound:

- `ipv4` (default): an IPv4 socket.
- `ipv6`: an IPv6 socket.
- `dual`: an IPv6 socket with IPv6-only switched off, so IPv4 clients are
  accepted as mapped addresses.

## Library use

```python
from socktools.udp import to_upper
from socktools.udp_client import UdpClient

assert to_upper(b"hello") == b"HELLO"

with UdpClient("127.0.0.1", 8080) as client:
    client.send(b"hello\n")
    print(client.receive(1.0))  # the reply bytes, or None after one second
```

Other building blocks:

- `socktools.clock`: `ctime_string(timestamp)`, `local_time_message(timestamp)`.
- `socktools.addresses`: `list_interface_addresses()` returns
  `InterfaceAddress` records whose `format()` gives the listing line.
- `socktools.time_server`: `AddressMode`, `build_response(timestamp)`,
  `create_listener(mode, port, host)`, `serve_once(listener, timestamp, out)`.
- `socktools.udp`: `bind_udp(port, host)`, `send_message(host, port, message, out)`,
  `receive_one(sock, bufsize)` returning a `Datagram` (`data`, `host`, `port`,
  `text`), and `serve_toupper(sock, max_datagrams)`.
- `socktools.udp_client`: `UdpClient` and `run(client, stdin, stdout)`.

## What it does not do

The time server handles exactly one connection and does not parse HTTP: every
request gets the same answer. There is no long-running TCP server, no TLS,
and the UDP listeners bind IPv4 only. The upper-casing server keeps no state
between datagrams and does not track clients.