"""Codeflix catalog test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Adapter-specific behavior (real uuid/ulid libraries).
- contract/     : Shared behavior/invariants enforced across multiple implementations.
- e2e/          : The `codeflix` CLI driven through click's CliRunner.
- fixtures/     : Shared pytest fixtures (registered in tests/conftest.py).
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit fast and deterministic; inject FixedClock/SimpleIdGenerator
  instead of relying on the wall clock.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
