from .settings import ConflictPolicy, RegistrySettings, load_settings

__all__ = ["ConflictPolicy", "RegistrySettings", "load_settings"]
