"""
AccountSystem7702 interface ABI.

Contains the nonce accessor and the batched execute entry point.
"""

ACTION_COMPONENTS = [
    {"internalType": "address", "name": "target", "type": "address"},
    {"internalType": "bytes", "name": "data", "type": "bytes"},
    {"internalType": "uint256", "name": "value", "type": "uint256"},
    {"internalType": "uint256", "name": "nonce", "type": "uint256"},
    {"internalType": "uint256", "name": "expiration", "type": "uint256"},
    {"internalType": "address", "name": "feeToken", "type": "address"},
    {"internalType": "uint256", "name": "feeValue", "type": "uint256"},
    {"internalType": "bool", "name": "isBasisPoints", "type": "bool"},
]

ACCOUNT_SYSTEM_7702_ABI = [
    {
        "inputs": [],
        "name": "nonce",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {
                "components": ACTION_COMPONENTS,
                "internalType": "struct AccountSystem7702.Action[]",
                "name": "actions",
                "type": "tuple[]",
            },
            {"internalType": "bytes[]", "name": "signatures", "type": "bytes[]"},
        ],
        "name": "execute",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
]
