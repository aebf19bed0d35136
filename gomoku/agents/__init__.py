"""Decision sources: anything that can pick a move for one marker."""
