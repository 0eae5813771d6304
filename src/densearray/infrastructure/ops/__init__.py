"""
CPU (NumPy) kernels and the NDArray-level functions built on them.
"""
