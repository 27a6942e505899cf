"""
Protocol definitions for output renderers.

Both encodings carry numerically identical values; only surface
syntax differs.
"""
from typing import Protocol

from ..models import SignatureBundle


class Renderer(Protocol):
    """Protocol for output bundle encodings."""
    
    def render(self, bundle: SignatureBundle) -> str:
        """
        Render bundle as text.
        
        Args:
            bundle: Complete output bundle
            
        Returns:
            Text to write to stdout, without a trailing newline
        """
        ...
