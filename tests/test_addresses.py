import socket
from types import SimpleNamespace
from unittest.mock import patch

from socktools.addresses import InterfaceAddress, list_interface_addresses, main

FAKE_TABLE = {
    "lo": [
        SimpleNamespace(family=socket.AF_INET, address="127.0.0.1"),
        SimpleNamespace(family=socket.AF_INET6, address="::1"),
    ],
    "eth0": [
        SimpleNamespace(family=-1, address="00:00:5e:00:53:00"),
        SimpleNamespace(family=socket.AF_INET, address="192.0.2.10"),
    ],
}


def test_format_layout():
    item = InterfaceAddress("lo", "IPv4", "127.0.0.1")
    assert item.format() == "lo\tIPv4\t\t127.0.0.1"


def test_list_filters_and_keeps_order():
    with patch("socktools.addresses.psutil.net_if_addrs", return_value=FAKE_TABLE):
        result = list_interface_addresses()
    assert result == [
        InterfaceAddress("lo", "IPv4", "127.0.0.1"),
        InterfaceAddress("lo", "IPv6", "::1"),
        InterfaceAddress("eth0", "IPv4", "192.0.2.10"),
    ]


def test_real_interfaces_only_ip_families():
    result = list_interface_addresses()
    assert all(item.family in ("IPv4", "IPv6") for item in result)


def test_main_prints_lines(capsys):
    with patch("socktools.addresses.psutil.net_if_addrs", return_value=FAKE_TABLE):
        assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "lo\tIPv4\t\t127.0.0.1",
        "lo\tIPv6\t\t::1",
        "eth0\tIPv4\t\t192.0.2.10",
    ]


def test_main_reports_failure(capsys):
    with patch("socktools.addresses.psutil.net_if_addrs", side_effect=OSError("boom")):
        assert main() == 1
    assert capsys.readouterr().out == "getifaddrs call failed\n"