"""
Multiplication Engine
=====================
Dot products and chained matrix products over the model types.

Note: This package is pure Python/NumPy and must NOT import the io adapters.
"""
from matrixmath.analysis.products import dot_product, multiply, pairwise_multiply

__all__ = ["dot_product", "multiply", "pairwise_multiply"]
