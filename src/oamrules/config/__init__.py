"""Configuration layer — pydantic models, settings, logging."""
