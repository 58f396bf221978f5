"""
The MODEL layer contains the value types of the library.
It has NO knowledge of databases or files.
It deals with storage, indexing and in-place scaling only.
"""
from matrixmath.model.vector import Vector
from matrixmath.model.matrix import Matrix

__all__ = ["Vector", "Matrix"]
