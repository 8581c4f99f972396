"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class DeliveryFailedError(ProviderError):
    """Email provider rejected the message (non-2xx response)."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class RemoteCallError(AdapterError):
    """Remote call did not complete."""

    pass


class RemoteTimeoutError(RemoteCallError):
    """Remote call exceeded its time bound."""

    pass


class RemoteUnavailableError(RemoteCallError):
    """Remote endpoint could not be reached or failed at the transport level."""

    pass
