"""
Decoy - administrative CMS add-on for FastAPI applications.

This package provides:
- A service provider that wires configuration, auth and admin routes
- A wildcard resolver for nested admin URLs
- Ancestry inference between nested resource controllers
"""

__version__ = "0.1.0"
