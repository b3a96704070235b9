[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "socktools"
version = "1.0.0"
description = "Small socket tools: a one-shot HTTP time server, UDP send/receive tools, an upper-casing UDP echo server, an interactive UDP client and an interface address lister."
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["socket", "udp", "tcp", "networking", "time server", "ipv6", "dual-stack"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
socktools-time = "socktools.clock:main"
socktools-socket-ready = "socktools.clock:socket_ready_main"
socktools-addresses = "socktools.addresses:main"
socktools-time-server = "socktools.time_server:main"
socktools-udp-recvfrom = "socktools.udp:recvfrom_main"
socktools-udp-sendto = "socktools.udp:sendto_main"
socktools-udp-toupper = "socktools.udp:serve_toupper_main"
socktools-udp-client = "socktools.udp_client:main"

[tool.hatch.build.targets.wheel]
packages = ["socktools"]

[tool.pytest.ini_options]
addopts = "-ra"
