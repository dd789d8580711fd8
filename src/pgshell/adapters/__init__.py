"""Adapters layer - implementations of ports.

Inbound adapters drive the application (the command-line entry point).
Outbound adapters implement external dependencies (pg_ctl, the database
driver).
"""
