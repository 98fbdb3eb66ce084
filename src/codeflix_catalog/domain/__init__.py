"""Domain layer for the Codeflix catalog.

Contains business rules: aggregates and the errors they raise. Identity and
time come in through the ports in `codeflix_catalog.interfaces`; concrete
implementations are chosen by `codeflix_catalog.bootstrap`.

Dependency rule: may import `codeflix_catalog.interfaces`; do not import from
`codeflix_catalog.adapters`, `codeflix_catalog.entrypoints` or
`codeflix_catalog.bootstrap`.
"""
