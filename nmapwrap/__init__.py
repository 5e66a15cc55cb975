"""Typed options for building nmap command lines, and parsing of nmap interface listings."""

__version__ = "0.1.0"