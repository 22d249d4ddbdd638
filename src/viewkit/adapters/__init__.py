"""Adapters from browser automation libraries to viewkit capabilities."""
