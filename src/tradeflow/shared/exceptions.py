"""Consolidated exceptions for TradeFlow.

All custom exceptions are defined here to provide a single source of truth
for error handling across the engine, the session and the adapters.
"""


class TradeFlowError(Exception):
    """Base exception for TradeFlow errors"""

    pass


class EngineError(TradeFlowError):
    """Base error for rejected engine operations"""

    pass


class UnknownSymbolError(EngineError):
    """Raised when a symbol is not in the catalog or not followed"""

    def __init__(self, symbol: str, reason: str = "not in catalog"):
        self.symbol = symbol
        super().__init__(f"Unknown symbol {symbol!r}: {reason}")


class AlreadyFollowingError(EngineError):
    """Raised when following a symbol that is already followed"""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Already following {symbol!r}")


class InvalidQuantityError(EngineError):
    """Raised when a share delta is negative"""

    def __init__(self, symbol: str, delta: int):
        self.symbol = symbol
        self.delta = delta
        super().__init__(
            f"Share delta for {symbol!r} must be non-negative, got {delta}"
        )


class PersistenceError(TradeFlowError):
    """Raised when a subscription store call fails"""

    def __init__(self, operation: str, symbol: str, cause: Exception | None = None):
        self.operation = operation
        self.symbol = symbol
        self.cause = cause
        message = f"Subscription {operation} failed for {symbol!r}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class IdentityError(TradeFlowError):
    """Raised when the identity provider rejects a call"""

    pass


class ConfigurationError(TradeFlowError):
    """Raised when configuration is invalid or missing"""

    pass
