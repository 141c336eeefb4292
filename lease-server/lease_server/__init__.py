"""Lease lifecycle server for devices rented out on the P2P VPS marketplace."""

__version__ = "1.0.0"
