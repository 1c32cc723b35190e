"""
nametape: Name Tape Label Generation Library

Renders NRIC names into fixed-width name tape labels following
Chinese/English, Malay and Indian naming conventions.
"""

__version__ = "0.1.0"

__all__ = ["NameTapeGenerator"]

def __getattr__(name):
    """Lazy import so the types package can be used on its own."""
    if name == "NameTapeGenerator":
        from .generator import NameTapeGenerator
        return NameTapeGenerator
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
