"""Interfaces for radix64.

Framework-free contracts (ABCs) shared by the codec and its consumers.

Dependency rule: this package is independent; do not import from any
other `radix64.*` modules.
"""
