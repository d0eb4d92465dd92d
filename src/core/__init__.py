"""
Core numeric primitives.

This module contains the Num abstraction shared by indicator and strategy
code, independent of the concrete numeric representation.
"""
