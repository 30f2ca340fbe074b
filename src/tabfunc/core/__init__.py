"""
Core domain models and mathematical primitives.

This module contains the building blocks shared by every tabulated function
store: the point value object and the epsilon-guarded comparisons.
"""
