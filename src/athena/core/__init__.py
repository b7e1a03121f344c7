"""Shared configuration, types and errors."""
