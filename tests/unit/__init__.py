"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- Inject FixedClock and SimpleIdGenerator instead of reading the wall clock
  or relying on random ids, except where a test is about exactly that.
- Assert behavior (field values, raised messages), not private state.
"""
