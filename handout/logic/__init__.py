"""Core handout logic layer.

Subpackages:
- selection: resolving free text to a catalog medication
- plan: pure plan updates and the session store that applies them
- rendering: list and handout views
"""
__all__ = ["selection", "plan", "rendering"]
