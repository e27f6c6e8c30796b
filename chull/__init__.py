"""Convex hull area by Graham scan, with a command interpreter and TCP servers."""

__version__ = "0.1.0"