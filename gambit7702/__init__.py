"""
AccountSystem7702 action tooling for the DegenGambit contract.

Builds, signs and packs ``execute`` calldata for delegated ``accept`` calls.
"""

__version__ = "0.1.0"
