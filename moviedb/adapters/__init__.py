"""Adapters : interfaces utilisateur (CLI)."""
