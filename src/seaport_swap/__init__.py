"""Seaport Swap: build, sign and fulfill peer-to-peer swap orders."""

__version__ = "0.1.0"
