"""Command-line inventory manager backed by a local SQLite file."""
