"""Exceptions raised along the accept pipeline."""


class AcceptError(Exception):
    """Base exception for action construction failures"""
    pass


class ValidationError(AcceptError, ValueError):
    """A command-line flag is missing or malformed"""
    pass


class KeyLoadError(AcceptError):
    """The keystore could not be read or decrypted"""
    pass


class ChainError(AcceptError):
    """The RPC endpoint could not be reached or a contract read failed"""
    pass


class EncodingError(AcceptError):
    """ABI packing or unpacking failed"""
    pass


class SigningError(AcceptError):
    """The action could not be signed"""
    pass
