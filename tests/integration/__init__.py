"""Integration tests.

Purpose
- Exercise the codec through its consumers, such as the token generator.
"""
