"""Diagnostic submission models and workflow."""
