"""Shared building blocks: validation, logging and exceptions."""
