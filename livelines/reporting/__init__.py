"""Reporting utilities for livelines CLI output."""
