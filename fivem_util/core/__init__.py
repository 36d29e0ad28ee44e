"""Core parsing, scanning and artifact helpers."""
