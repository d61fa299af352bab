"""SSHells: pick a shell to launch at the start of a remote session."""

__version__ = "0.3.0"
