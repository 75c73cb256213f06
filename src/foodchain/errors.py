"""Exceptions raised by the supply chain simulator."""


class FoodchainError(Exception):
    """Base class for simulator errors."""


class InvalidEventError(FoodchainError):
    """An event is missing a required field or carries an ill-typed one.

    Raised instead of letting a comparison or multiplication run on missing
    data and produce a wrong number.
    """

    def __init__(self, message: str, field: str | None = None, event_id: int | None = None):
        super().__init__(message)
        self.field = field
        self.event_id = event_id


class LedgerError(FoodchainError):
    """The ledger was asked to do something it does not allow."""


class ConfigError(FoodchainError):
    """A configuration value from the environment or config file is malformed."""
