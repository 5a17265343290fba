"""
DegenGambit interface ABI.

Only the entry points the accept tooling calls.
"""

DEGEN_GAMBIT_ABI = [
    {"inputs": [], "name": "accept", "outputs": [], "stateMutability": "nonpayable", "type": "function"},
]
