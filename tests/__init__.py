"""
Test suite for cw-asset-reconciler

Contains:
- tests/unit/          : Unit tests for individual modules
"""
