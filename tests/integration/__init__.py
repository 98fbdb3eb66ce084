"""Integration tests.

Purpose
- Exercise adapter-specific behavior against the real libraries behind them
  (`uuid`, `ulid-py`).
"""
