"""Facade layer: the only entry point external callers use.

Validates untrusted input, delegates to the domain service, and maps
domain entities onto the external :class:`UserOutput` shape.
"""

from layers_showcase.facade.schemas import UserOutput
from layers_showcase.facade.user import UserFacade

__all__ = ["UserFacade", "UserOutput"]
