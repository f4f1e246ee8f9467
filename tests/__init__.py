"""Behavioural tests for mocket."""
