"""Relational storage."""
