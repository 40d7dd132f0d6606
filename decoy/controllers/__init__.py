"""
Admin controllers package.
"""

from decoy.controllers.base import Base, RouteAction
from decoy.controllers.registry import ControllerRegistry, registry

__all__ = [
    "Base",
    "RouteAction",
    "ControllerRegistry",
    "registry",
]
