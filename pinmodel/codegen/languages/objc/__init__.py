"""
Objective-C code generator module.

Generates property declarations, NSCoding statements and dictionary
construction/merge statements for immutable Objective-C models.
"""

from .generator import ObjCGenerator, create_objc_generator, create_strict_generator
from .property import ObjCProperty
from .types import (
    AtomicityType,
    MemoryAssignmentType,
    MutabilityType,
    ObjCTypeMapper,
    PrimitiveType,
)

__all__ = [
    "ObjCGenerator",
    "ObjCProperty",
    "ObjCTypeMapper",
    "AtomicityType",
    "MemoryAssignmentType",
    "MutabilityType",
    "PrimitiveType",
    "create_objc_generator",
    "create_strict_generator",
]
