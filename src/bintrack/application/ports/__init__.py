"""Application ports - interfaces for external adapters."""

from bintrack.application.ports.permission_checker import PermissionChecker
from bintrack.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
