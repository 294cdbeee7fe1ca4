"""
eventbus package.

This package contains:
- Events (payload carrier, handler contract, dispatcher)
- Logging configuration
- Settings loaded from the environment
- A ticker demo CLI
"""

__version__ = "0.1.0"
