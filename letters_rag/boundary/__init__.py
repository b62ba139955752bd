"""
Boundary layer.

Adapters to storage backends that sit behind the index store contract.
"""
