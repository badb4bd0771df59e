"""Core infrastructure: settings, logging, the document store and errors."""
