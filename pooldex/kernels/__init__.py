"""
Kernel layer.

This package groups the deterministic integer kernels used by the pool
calculator. `pooldex/kernels/python/` holds small, human-readable modules whose
semantics the engine in `pooldex/core/pool/` builds on.
"""
