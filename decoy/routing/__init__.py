"""
Admin routing: wildcard resolution, URL generation and ancestry.
"""

from decoy.routing.ancestry import Ancestry
from decoy.routing.request import RequestSnapshot
from decoy.routing.url_generator import UrlGenerator
from decoy.routing.wildcard import Wildcard

__all__ = [
    "Ancestry",
    "RequestSnapshot",
    "UrlGenerator",
    "Wildcard",
]
