"""Application exception hierarchy."""

# Default user-facing messages
_DEFAULT_USER_MSG = "Something went wrong"
_SAVED_CREDENTIALS_MSG = "Saved credentials are unavailable, please enter them again"
_STORAGE_MSG = "Connection settings storage is unavailable"
_KEYCHAIN_MSG = "System keychain is unavailable"


class AppError(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str = "Internal error",
        user_message: str = _DEFAULT_USER_MSG,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.user_message = user_message


class InvariantViolationError(AppError):
    """Raised when a secure-path operation gets a config without certificate material."""

    def __init__(
        self,
        message: str = "Connection configuration is missing certificate fields",
        user_message: str = _DEFAULT_USER_MSG,
    ) -> None:
        super().__init__(message=message, user_message=user_message)


class CredentialNotFoundError(AppError):
    """Raised when the keychain has no password for an encrypted client key."""

    def __init__(
        self,
        message: str = "Cannot find password for encrypted client key",
        user_message: str = _SAVED_CREDENTIALS_MSG,
    ) -> None:
        super().__init__(message=message, user_message=user_message)


class MalformedCiphertextError(AppError):
    """Raised when a stored client key is not of the form ``ciphertext.salt``."""

    def __init__(
        self,
        message: str = "Cannot decrypt client key",
        user_message: str = _SAVED_CREDENTIALS_MSG,
    ) -> None:
        super().__init__(message=message, user_message=user_message)


class CipherError(AppError):
    """Raised when key or IV material cannot be used by the cipher."""

    def __init__(
        self,
        message: str = "Cipher operation failed",
        user_message: str = _SAVED_CREDENTIALS_MSG,
    ) -> None:
        super().__init__(message=message, user_message=user_message)


class DecryptionError(CipherError):
    """Raised when ciphertext cannot be decoded, unpadded or read as UTF-8."""

    def __init__(
        self,
        message: str = "Decryption failed",
        user_message: str = _SAVED_CREDENTIALS_MSG,
    ) -> None:
        super().__init__(message=message, user_message=user_message)


class StorageError(AppError):
    """Raised when the durable key-value store is unavailable or holds a corrupted record."""

    def __init__(
        self,
        message: str = "Key-value store operation failed",
        user_message: str = _STORAGE_MSG,
    ) -> None:
        super().__init__(message=message, user_message=user_message)


class BackendError(AppError):
    """Raised when the secure credential backend (OS keychain) fails."""

    def __init__(
        self,
        message: str = "Secure credential backend failed",
        user_message: str = _KEYCHAIN_MSG,
    ) -> None:
        super().__init__(message=message, user_message=user_message)
