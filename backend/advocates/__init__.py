"""Advocate directory: listing API and client."""
