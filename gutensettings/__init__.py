"""Block editor settings adapter.

Translates a declarative editor settings mapping into feature-flag, filter
and post-type registrations against a host platform.
"""

from gutensettings.core._version import __version__


__all__ = ["__version__"]
