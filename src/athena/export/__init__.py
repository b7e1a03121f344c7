"""Rendering of diagnostic results."""
