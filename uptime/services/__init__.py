"""Uptime check services."""
