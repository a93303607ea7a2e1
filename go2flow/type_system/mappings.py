"""
Type mappings from Go predeclared types to Flow primitives.

This module contains the table of Go built-in type names that have a
direct Flow equivalent. Any name not listed here is a nominal reference
and is emitted unchanged.
"""

from typing import Optional


# =============================================================================
# TYPE MAPPING CONSTANTS
# =============================================================================

GO_TO_FLOW_MAP = {
    # Integer types -> number
    'int': 'number',
    'int8': 'number',
    'int16': 'number',
    'int32': 'number',
    'int64': 'number',
    'uint': 'number',
    'uint8': 'number',
    'uint16': 'number',
    'uint32': 'number',
    'uint64': 'number',
    'uintptr': 'number',
    'byte': 'number',
    'rune': 'number',
    # Floating point -> number
    'float32': 'number',
    'float64': 'number',
    # Boolean
    'bool': 'boolean',
    # String
    'string': 'string',
    # Empty interface
    'any': 'any',
}


# =============================================================================
# TYPE CONVERSION FUNCTIONS
# =============================================================================

def go_primitive_to_flow(name: str) -> Optional[str]:
    """
    Look up the Flow primitive for a Go predeclared type name.

    Args:
        name: An unqualified Go type name (e.g. 'int64', 'Person')

    Returns:
        The Flow primitive name, or None if the name is not a primitive
    """
    return GO_TO_FLOW_MAP.get(name)
