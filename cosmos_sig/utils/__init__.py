"""Encoding, canonicalization and validation helpers."""
