"""Bootstrap the application's collaborators from configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from codeflix_catalog import config
from codeflix_catalog.adapters.clocks import SystemClock
from codeflix_catalog.adapters.id_generators import (
    SimpleIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from codeflix_catalog.interfaces.clock import Clock
from codeflix_catalog.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring."""

    id_generator: IdGenerator
    clock: Clock


def build_id_generator(name: str) -> IdGenerator:
    """Build the id generator registered under `name`.

    Raises:
        UnknownIdGeneratorError: If `name` is not a supported generator.
    """
    match name:
        case "uuid4":
            return UUIDv4Generator()
        case "ulid":
            return ULIDGenerator()
        case "simple":
            return SimpleIdGenerator()
        case _:
            raise config.UnknownIdGeneratorError(name)


def bootstrap(id_generator: str | None = None) -> AppContainer:
    """Wire the id generator and clock.

    Args:
        id_generator: Name of the id generator to use. When None, the name is
            read from `CODEFLIX_ID_GENERATOR`.
    """
    name = id_generator or config.get_id_generator_name()
    logger.debug("Bootstrapping with id generator %r", name)
    return AppContainer(id_generator=build_id_generator(name), clock=SystemClock())
