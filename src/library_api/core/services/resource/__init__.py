from .resource_service import ResourceService, replace_scalar_fields

__all__ = ["ResourceService", "replace_scalar_fields"]
