from django.core.exceptions import ValidationError


class InvalidAmount(ValidationError):
    """Raised when an order amount or bonus is negative, non-numeric or non-finite."""

    def __init__(self, field: str, value, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid {field} {value!r}: {reason}",
            code="invalid_amount",
            params={"field": field, "value": value},
        )
