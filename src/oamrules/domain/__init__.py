"""Domain layer — asset vocabulary, rule records, and errors.

This layer depends only on stdlib and pydantic.
It must never import from services or config.
"""
