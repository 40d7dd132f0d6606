"""
Core module for configuration and shared utilities.

This module provides:
- Configuration read from the environment
- Common exceptions
- Naming convention helpers
- Security utilities and auth strategies
"""
