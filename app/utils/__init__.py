"""
==============================================================================
Utilities Package
==============================================================================

Utility classes and functions for the application.

Modules:
--------
- identifiers: Injectable identifier generators

==============================================================================
"""

from .identifiers import IdGenerator, SequentialIdGenerator, uuid_generator

__all__ = [
    "IdGenerator",
    "SequentialIdGenerator",
    "uuid_generator",
]
