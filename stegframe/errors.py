"""Exceptions raised by the steganography framework and its plug-ins."""


class SilentEyeError(Exception):
    """Framework error carrying a user-facing message and technical details."""

    def __init__(self, message: str, details: str = "") -> None:
        super().__init__(message, details)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class ModuleError(SilentEyeError):
    """Error raised by format and cryptography plug-ins."""