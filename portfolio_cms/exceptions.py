"""Request-level errors raised by services and rendered by the handlers in main.py."""


class PayloadInvalid(Exception):
    """Rejected input: missing field, bad identifier, duplicate, unsupported upload. Rendered as 400."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ResourceNotFound(Exception):
    """No document with the requested id. Rendered as 404."""

    def __init__(self, label: str) -> None:
        self.message = f"{label} not found"
        super().__init__(self.message)
