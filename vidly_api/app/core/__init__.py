"""Configuration, logging, database access, security and error handling."""
