"""Interfaces (application boundary) for the Codeflix catalog.

Defines framework-free contracts (ABCs) for the collaborators the domain
needs from the outside world: clocks and ID generators. Business rules stay
out of this package.

Dependency rule: this package is independent; do not import from any
`codeflix_catalog.*` modules.
"""
