"""Principal - a user whose access is being checked."""

from dataclasses import dataclass

from bintrack.domain.value_objects import GlobalRole


@dataclass
class Principal:
    """User with a global role."""

    id: str
    role: GlobalRole
    email: str | None = None
    name: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role is GlobalRole.ADMIN
