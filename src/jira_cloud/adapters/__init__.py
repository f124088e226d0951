"""Adapters: the httpx-backed client and the REST services built on it."""
