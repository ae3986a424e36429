"""Shared constants, exceptions and logging setup."""
