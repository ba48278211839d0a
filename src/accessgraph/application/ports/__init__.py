"""Application ports - interfaces for external adapters."""

from accessgraph.application.ports.action_registry import ActionRegistry
from accessgraph.application.ports.permission_checker import PermissionChecker
from accessgraph.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "ActionRegistry",
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
