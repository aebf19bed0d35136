"""Core gameplay primitives (board, decisions, turn records and errors).

Kept free of any presentation concerns so it can be reused by the console
entry point, scripted players and tests.
"""
