"""
Utility functions module.

Small numeric helpers shared across factor scorers.
"""

from .numeric import clamp

__all__ = ["clamp"]
