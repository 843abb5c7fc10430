"""
Test suite for spikes-math

Contains:
- tests/unit/          : Unit tests for individual modules
"""
