"""Payload model shared between the ESM server extension and the Arma host."""

__version__ = "0.1.0"
