"""Contract tests.

Purpose
- Define behavior once and run it against every `IntegerCodec` variant so
  they stay interchangeable.

Guidelines
- Parametrize implementations via fixtures.
- Assert only the public contract, not internals.
"""
