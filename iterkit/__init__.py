"""Iterator adaptors and helpers: combinations, coalescing, put-back, duplicates,
extrema sets, result-aware mapping, cartesian products and more."""

__version__ = "0.1.0"