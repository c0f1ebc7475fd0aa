"""
setupcheck - developer machine setup verifier.

Checks the default shell, git version, git email, and git editor.
"""

__version__ = "1.0.0"
