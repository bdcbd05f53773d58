from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.backends import default_backend

def secret_to_bytes(secret: int) -> bytes:
    """Big-endian two's complement encoding, one spare sign bit (zero encodes as one byte)."""
    length = (secret.bit_length() + 8) // 8
    return secret.to_bytes(length, 'big', signed=True)

def create_commitment(secret: int) -> str:
    """Create cryptographic commitment"""
    digest = hashes.Hash(hashes.SHA256(), backend=default_backend())
    digest.update(secret_to_bytes(secret))
    return digest.finalize().hex()

def verify_commitment(secret: int, commitment: str) -> bool:
    return create_commitment(secret) == commitment.strip().lower()
