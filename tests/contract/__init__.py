"""Contract tests.

Purpose
- Define behavior once and run it against every ID generator backend, so the
  backends stay interchangeable for category identity.

Guidelines
- Parametrize implementations via fixtures.
- Assert only the public contract, not internals.
"""
