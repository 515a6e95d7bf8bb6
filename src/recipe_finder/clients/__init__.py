"""Clients for external recipe APIs."""
