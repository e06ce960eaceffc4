"""Core: domain, contracts, configuration and services.

Nothing here prints; the CLI layer owns the consoles.
"""
