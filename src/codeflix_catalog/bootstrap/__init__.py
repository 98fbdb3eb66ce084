"""Bootstrap (composition root) for the Codeflix catalog.

Assembles the application at runtime: reads configuration and wires the
concrete adapters (ID generator, clock) that entrypoints pass to the domain.

Import rules:
- Entry points import *this* package for their collaborators.
- This package may import: `codeflix_catalog.adapters`,
  `codeflix_catalog.interfaces` and `codeflix_catalog.config`.
- Inner layers must not import `codeflix_catalog.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_id_generator

__all__ = ["AppContainer", "bootstrap", "build_id_generator"]
