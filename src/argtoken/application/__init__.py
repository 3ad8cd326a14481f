"""Application layer - the parsing and building algorithms."""
