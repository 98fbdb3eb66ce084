"""The `codeflix` command-line interface."""
