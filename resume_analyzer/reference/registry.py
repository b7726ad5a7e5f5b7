from __future__ import annotations

import re

from .models import ReferenceData, RoleProfile


def _role_key(label: str) -> str:
    return re.sub(r"\s+", " ", (label or "").strip()).casefold()


class RoleProfileRegistry:
    def __init__(self, reference: ReferenceData) -> None:
        self._default = reference.roles[reference.default_role]
        self._profiles = {_role_key(label): profile for label, profile in reference.roles.items()}

    @property
    def default_profile(self) -> RoleProfile:
        return self._default

    def roles(self) -> list[str]:
        return [profile.label for profile in self._profiles.values()]

    def is_known(self, role: str) -> bool:
        return _role_key(role) in self._profiles

    def profile_for(self, role: str | None) -> RoleProfile:
        """Return the profile for ``role``; unknown or empty labels get the default profile."""
        return self._profiles.get(_role_key(role or ""), self._default)
