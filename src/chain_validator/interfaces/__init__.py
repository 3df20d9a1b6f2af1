"""
Interfaces Layer - Callable Protocols.

Protocols:
    - Check: Predicate over the value under validation
    - MessageProvider: Failure message for a value
    - FallbackProvider: Recovery function for failed results
"""

from chain_validator.interfaces.check import Check, FallbackProvider, MessageProvider

__all__ = ["Check", "FallbackProvider", "MessageProvider"]
