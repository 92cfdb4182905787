"""Shared utilities: configuration, logging, errors, dates and report I/O."""
