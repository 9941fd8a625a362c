"""Gopher Browser - a terminal client for the Gopher protocol (RFC 1436)."""

__version__ = "0.1.0"
