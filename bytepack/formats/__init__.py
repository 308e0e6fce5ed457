"""Hex text handling and JSON session/preset storage."""
