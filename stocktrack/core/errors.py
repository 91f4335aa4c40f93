class SaleValidationError(ValueError):
    """Client input that cannot be recorded or queried (HTTP 400)."""


class NotFoundError(LookupError):
    """A requested artifact or record set does not exist (HTTP 404)."""


__all__ = ["NotFoundError", "SaleValidationError"]
