"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O; environment variables are set through monkeypatch.
- Prefer behavior-centric assertions over implementation details.
"""
