"""Client-side errors."""


class TransportError(Exception):
    """A listing request failed on the network or returned a non-2xx status.

    Superseded attempts are not transport errors; they surface as
    ``asyncio.CancelledError`` and are never shown to the user.
    """

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
