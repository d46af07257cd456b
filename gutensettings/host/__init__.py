"""Host implementations."""

from .memory import InMemoryHost, default_reusable_block_type


__all__ = ["InMemoryHost", "default_reusable_block_type"]
