"""Encoding and storage of generated flowers."""
