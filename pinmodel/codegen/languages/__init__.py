"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .objc import ObjCGenerator, create_objc_generator, create_strict_generator

__all__ = [
    "ObjCGenerator",
    "create_objc_generator",
    "create_strict_generator",
]
