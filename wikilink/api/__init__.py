"""Wikilink API."""
