"""
Summary: Use cases for decomposing, reconstructing and joining paths.
Why: Offer the configured public operations in one import.
"""

from .assemble import join_path, reconstruct
from .decompose import decompose

__all__ = ["decompose", "join_path", "reconstruct"]
