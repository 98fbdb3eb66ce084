"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from codeflix_catalog.bootstrap import build_id_generator
from codeflix_catalog.config import SUPPORTED_ID_GENERATORS
from codeflix_catalog.interfaces.id_generator import IdGenerator


@pytest.fixture(params=SUPPORTED_ID_GENERATORS)
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield a fresh IdGenerator for every supported backend.

    Backends are built through the composition root, so a name added to
    `SUPPORTED_ID_GENERATORS` is covered here automatically.
    """
    yield build_id_generator(request.param)


@pytest.fixture(params=["ulid"])
def monotonic_id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield instances of IdGenerators that promise monotonic ID order."""
    yield build_id_generator(request.param)
