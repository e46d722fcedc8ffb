"""Core weather rules."""
