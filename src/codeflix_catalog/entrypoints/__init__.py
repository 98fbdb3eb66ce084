"""Entrypoints (inbound adapters) for the Codeflix catalog.

Expose the domain to the outside world: currently the `codeflix` CLI. Parse
and validate inputs, obtain collaborators from `codeflix_catalog.bootstrap`,
call into the domain and present results.
"""
