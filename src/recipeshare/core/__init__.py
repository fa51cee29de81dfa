"""Core application infrastructure: config, events, exceptions, middleware."""
