"""
profilekit - layered filament profile resolution

Resolves a named slicer material profile through its ``inherits`` chain across
user and system profile libraries and flattens it into one JSON document.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
