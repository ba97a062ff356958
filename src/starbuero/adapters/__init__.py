"""Adapters: HTTP transport (httpx) and response interpretation."""
