# src/levchange/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains adapters between the engine and the outside world:
- Formatting (text output)
"""

__all__ = []
