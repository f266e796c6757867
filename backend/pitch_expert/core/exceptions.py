"""
Error taxonomy.

Each error carries the text that is shown to the user. None of them are
fatal: the triggering action fails and the session stays usable.
"""


class PitchExpertError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FormValidationError(PitchExpertError):
    """Blank form; never reaches the network."""


class TransportError(PitchExpertError):
    """Non-2xx status, connection failure or timeout."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def retryable(self) -> bool:
        return self.status_code is None or self.status_code >= 500


class PayloadError(PitchExpertError):
    """2xx response whose body carries an ``error`` field or is malformed."""


class ExportError(PitchExpertError):
    """PDF generation or share hand-off failed."""
