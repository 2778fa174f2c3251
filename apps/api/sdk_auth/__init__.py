"""Zoom Meeting SDK auth endpoint."""
