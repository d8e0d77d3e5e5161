class StorageError(Exception):
    """Raised when the key-value store cannot be read or written."""

    def __init__(self, message: str = "Key-value store operation failed"):
        self.message = message
        super().__init__(message)
