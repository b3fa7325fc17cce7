"""Prazos HTTP API."""
