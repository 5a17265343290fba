"""
Contract ABI package for the accept tooling.

Contains the AccountSystem7702 and DegenGambit interfaces.
"""

from .account_system import ACCOUNT_SYSTEM_7702_ABI, ACTION_COMPONENTS
from .degen_gambit import DEGEN_GAMBIT_ABI

__all__ = [
    # AccountSystem7702
    'ACCOUNT_SYSTEM_7702_ABI',
    'ACTION_COMPONENTS',

    # DegenGambit
    'DEGEN_GAMBIT_ABI',
]
