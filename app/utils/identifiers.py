"""
==============================================================================
Identifier Generation Module
==============================================================================

Injectable identifier generators for catalog records.

This module implements:
- IdGenerator: Callable type producing opaque string identifiers
- uuid_generator: Default generator backed by random UUID4 values
- SequentialIdGenerator: Deterministic generator for tests and fixtures

==============================================================================
"""

from __future__ import annotations

import itertools
import uuid
from typing import Callable


IdGenerator = Callable[[], str]


def uuid_generator() -> str:
    """Generate a random UUID4 identifier string."""
    return str(uuid.uuid4())


class SequentialIdGenerator:
    """
    Deterministic identifier generator.

    Produces ``prefix + "1"``, ``prefix + "2"``, ... on successive calls.

    Example:
        >>> generate = SequentialIdGenerator("book-")
        >>> generate(), generate()
        ('book-1', 'book-2')
    """

    def __init__(self, prefix: str = "product-", start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self._prefix}{next(self._counter)}"
