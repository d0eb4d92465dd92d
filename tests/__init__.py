"""
Test suite for the Num abstraction

Contains:
- tests/unit/          : Unit tests for Num, NaN, DecimalNum, DoubleNum, NumConfig
"""
