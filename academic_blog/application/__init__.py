"""Application layer for the academic blog."""
