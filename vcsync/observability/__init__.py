"""Logging and metrics for vcsync."""
