"""
Package engine.

Checksum, row assembly and export encoding for byte packages.
"""
