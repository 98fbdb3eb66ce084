"""Codeflix Catalog

Domain model for the Codeflix content catalog. Categories classify catalog
content and enforce their own validation rules on creation and update.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
