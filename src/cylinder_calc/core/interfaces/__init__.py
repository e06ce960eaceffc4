"""Structural contracts (Protocol) shared by the domain and the CLI."""
