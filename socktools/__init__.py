"""Small socket tools: a one-shot time server, UDP utilities, an interactive UDP client and interface listing."""

__version__ = "1.0.0"