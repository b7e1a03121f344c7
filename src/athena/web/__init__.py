"""HTTP interface for the diagnostic service."""
