"""Listing of the IPv4 and IPv6 addresses of the local network interfaces."""

from __future__ import annotations

import socket
import sys
from dataclasses import dataclass

import psutil

_FAMILY_LABELS = {
    socket.AF_INET: "IPv4",
    socket.AF_INET6: "IPv6",
}


@dataclass(frozen=True)
class InterfaceAddress:
    """One IP address assigned to a network interface."""

    name: str
    family: str
    address: str

    def format(self):
        """Return the tab separated listing line for this address."""
        return f"{self.name}\t{self.family}\t\t{self.address}"


def list_interface_addresses():
    """Return every IPv4 and IPv6 address of every local interface."""
    found = []
    for name, entries in psutil.net_if_addrs().items():
        for entry in entries:
            label = _FAMILY_LABELS.get(entry.family)
            if label is None or not entry.address:
                continue
            found.append(InterfaceAddress(name, label, entry.address))
    return found


def main(argv=None):
    """Print the interface address listing."""
    try:
        addresses = list_interface_addresses()
    except OSError:
        print("getifaddrs call failed")
        return 1
    for item in addresses:
        print(item.format())
    return 0