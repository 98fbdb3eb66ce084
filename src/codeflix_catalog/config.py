"""Configuration utilities for the Codeflix catalog.

This module centralizes small helpers and constants related to application configuration.
"""

import os

ID_GENERATOR_ENV_VAR = "CODEFLIX_ID_GENERATOR"  # pragma: no mutate
DEFAULT_ID_GENERATOR = "uuid4"  # pragma: no mutate
SUPPORTED_ID_GENERATORS = ("uuid4", "ulid", "simple")


class UnknownIdGeneratorError(ValueError):
    """Raised when CODEFLIX_ID_GENERATOR names an unsupported generator."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown id generator '{name}'. "
            f"Expected one of: {', '.join(SUPPORTED_ID_GENERATORS)}."
        )
        self.name = name


def get_id_generator_name() -> str:
    """Get the configured id generator name from the environment.

    Returns:
        The lower-cased value of `CODEFLIX_ID_GENERATOR`, or `"uuid4"` when unset
        or empty.

    Raises:
        UnknownIdGeneratorError: If the value is not a supported generator.
    """
    raw = os.environ.get(ID_GENERATOR_ENV_VAR) or DEFAULT_ID_GENERATOR
    name = raw.strip().lower()
    if name not in SUPPORTED_ID_GENERATORS:
        raise UnknownIdGeneratorError(name)
    return name
