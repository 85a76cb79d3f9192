"""Intermediate representation for design tokens and gradients."""

from .gradient import GradientPoint, GradientResult
from .tokens import CollectionResult, ModeValue, TokenType, VariableDefinition

__all__ = [
    "CollectionResult",
    "GradientPoint",
    "GradientResult",
    "ModeValue",
    "TokenType",
    "VariableDefinition",
]
