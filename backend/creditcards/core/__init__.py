"""Core enums, exceptions and logging setup."""
