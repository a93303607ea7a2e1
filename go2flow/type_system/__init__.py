"""
Types module for the Go to Flow transpiler.

This module provides the Go to Flow primitive type mappings.
"""

from .mappings import (
    go_primitive_to_flow,
    GO_TO_FLOW_MAP,
)

__all__ = [
    'go_primitive_to_flow',
    'GO_TO_FLOW_MAP',
]
