"""Video Title Proxy — traced HTTP front-end for YouTube video title lookups.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
