"""
Client module

Contains the AtCoder HTTP client and the cargo process client
"""

from .atcoder_client import AtCoderClient
from .cargo_client import CargoClient

__all__ = [
    "AtCoderClient",
    "CargoClient",
]
