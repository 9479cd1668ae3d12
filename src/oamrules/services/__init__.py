"""Service layer — rule compilation, validation, resolution, and caching.

Services may import from the domain layer.
They must never import from config at runtime.
"""
