"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UpstreamError(DomainError):
    """Raised when the upstream invite service cannot produce an invite.

    ``status_code`` is the upstream HTTP status, or None when the call never
    got a usable response (network failure, unparseable or incomplete body).
    """

    def __init__(self, status_code: int | None, detail: str):
        self.status_code = status_code
        self.detail = detail
        if status_code is None:
            super().__init__(f"Upstream invite request failed: {detail}")
        else:
            super().__init__(
                f"Upstream invite request failed with status {status_code}: {detail}"
            )
