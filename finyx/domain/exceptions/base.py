"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for every error the dashboard reports to the user.

    `code` is the machine-readable identifier returned in error bodies;
    `message` is the human-readable detail shown under the notice title.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
