"""Core — error types shared by every layer.

Invariants:
    - core/ never imports from api/ or infrastructure/
"""
