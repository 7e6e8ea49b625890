"""Text messaging between processes over SIGUSR1 and SIGUSR2, with the string, buffer and formatting helpers it uses."""

__version__ = "0.1.0"