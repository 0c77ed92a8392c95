"""
Test suite for shamir-recover

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
