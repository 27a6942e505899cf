"""Message hashing."""
from Crypto.Hash import SHA256


class MessageHasher:
    """Computes the SHA-256 digest that gets signed."""
    
    @staticmethod
    def hash_object(message: str | bytes) -> SHA256.SHA256Hash:
        """Return a pycryptodome hash object for message (for signing)."""
        if isinstance(message, str):
            message = message.encode('utf-8')
        return SHA256.new(message)
    
    def digest(self, message: str | bytes) -> bytes:
        """Return the 32-byte digest of message."""
        return self.hash_object(message).digest()
