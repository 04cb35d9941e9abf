"""Shared helpers for arscript CLI commands."""
