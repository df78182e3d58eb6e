"""
Core fixed-point percentage arithmetic.

This module contains the foundational building blocks: unit types for
amounts and basis points, checked integer arithmetic, and the basis-point
formulas. It has no persisted state and no external interfaces.
"""
