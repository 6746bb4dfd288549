"""
Custom exception classes for the vehicle rental ledger.

Constructors raise InvalidArgumentError for out-of-contract data; the service
layer turns these into ``(False, message)`` results and the controllers turn
the *NotFound errors into 404 responses.
"""


class InvalidArgumentError(ValueError):
    """Raised when an entity is constructed with out-of-contract data."""

    def __init__(self, message: str = "Error: invalid argument") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class DuplicateVehicleError(InvalidArgumentError):
    """Raised when a vehicle ID is already present in the catalog."""

    def __init__(self, message: str = "Error: duplicate vehicle id") -> None:
        super().__init__(message)


class DuplicateCustomerError(InvalidArgumentError):
    """Raised when a customer ID is already registered."""

    def __init__(self, message: str = "Error: duplicate customer id") -> None:
        super().__init__(message)


class VehicleNotFoundError(Exception):
    """Raised when a vehicle ID cannot be found in the catalog."""

    def __init__(self, message: str = "Error: vehicle not found") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class CustomerNotFoundError(Exception):
    """Raised when a customer ID cannot be found in the registry."""

    def __init__(self, message: str = "Error: customer not found") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message
