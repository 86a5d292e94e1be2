"""Configuration, database access, security helpers and error types."""
