"""
Course TA Test Suite.

Run with: pytest
"""
