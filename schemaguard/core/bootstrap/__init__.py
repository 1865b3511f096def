from .standard import create_standard_registry, create_standard_guard

__all__ = ["create_standard_registry", "create_standard_guard"]
