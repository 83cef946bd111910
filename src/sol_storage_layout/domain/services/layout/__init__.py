#!/usr/bin/env python3

"""Contract storage traversal services."""

from .base_linearizer import BaseLinearizer
from .variable_visitor import VariableVisitor

__all__ = [
    "BaseLinearizer",
    "VariableVisitor",
]
