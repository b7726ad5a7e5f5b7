from functools import lru_cache

from .local_reference import load_reference_data
from .models import ReferenceData, RoleProfile
from .registry import RoleProfileRegistry


@lru_cache(maxsize=1)
def get_reference_data() -> ReferenceData:
    return load_reference_data()


@lru_cache(maxsize=1)
def get_role_registry() -> RoleProfileRegistry:
    return RoleProfileRegistry(get_reference_data())


__all__ = [
    "ReferenceData",
    "RoleProfile",
    "RoleProfileRegistry",
    "get_reference_data",
    "get_role_registry",
    "load_reference_data",
]
