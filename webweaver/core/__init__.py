"""Core infrastructure: exceptions, logging, paths and CLI statistics."""
