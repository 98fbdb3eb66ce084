"""Adapters (infrastructure) for the Codeflix catalog.

Provide concrete implementations of the ports in `codeflix_catalog.interfaces`:
ID generators and clocks.

Dependency rule: may import `codeflix_catalog.interfaces`; must not import
`codeflix_catalog.entrypoints` or `codeflix_catalog.bootstrap`.
"""
