"""
connectfour.interfaces - Front ends for Connect Four

This package contains the terminal CLI and the registry used by front
ends that run several games at once.
"""

# Don't import anything here to avoid circular imports
__all__ = []
