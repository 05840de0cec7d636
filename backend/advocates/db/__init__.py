"""Database engine, sessions and types."""
