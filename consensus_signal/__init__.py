"""
consensus-signal - Signed consensus messages anchored to chain blocks

A Signal encodes "who did what, in which epoch, anchored to which block"
as a single signed consensus string, carries unsigned metadata alongside
it, and can be located on chain and sequenced against other signals.

Layers:
- domain: Signal entity, consensus codec, parameter store, ordering
- application: batch orchestration (sequencing)
- infrastructure: JSON-RPC chain client, local block clock, signing adapters
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
