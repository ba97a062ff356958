"""Core: configuration, domain models, validation and the request pipeline.

HTTP details (httpx) live in `starbuero.adapters`.
"""
