"""
Kernel layer.

`rex_pool/kernels/python/` contains the integer-only pool accounting kernels.
They take plain ints, return plain ints or frozen result dataclasses, and
never touch pool state themselves.
"""
