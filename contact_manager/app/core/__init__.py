"""Core infrastructure: settings, logging, database and error types."""
