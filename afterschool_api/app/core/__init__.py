"""Configuration, logging, persistence and error types."""
