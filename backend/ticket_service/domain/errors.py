class DomainError(Exception):
    """Base class for errors raised by the purchase domain."""


class InvalidPurchaseError(DomainError):
    """Raised when a purchase is rejected, by validation or by a collaborator."""

    @property
    def reason(self) -> str:
        return str(self)
