"""Storefront configuration.

Resolves the storefront backend's server, database, cache, token and object
storage settings from the process environment and an optional ``.env`` file,
and hands them back as one immutable value.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Development status indicators
__status__ = "Alpha"
