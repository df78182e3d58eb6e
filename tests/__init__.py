"""
Test suite for the basis-point percentage engine

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
