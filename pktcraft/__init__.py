"""Serialise TCP and UDP headers, parse MAC, IPv4 and hex values, and compute Internet checksums."""

__version__ = "0.1.0"

__all__ = ["__version__"]