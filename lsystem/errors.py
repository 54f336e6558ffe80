"""
Exceptions raised by the L-system engine.
"""


class LSystemError(Exception):
    pass


class ConfigError(LSystemError, ValueError):
    """Raised at construction time for degenerate or malformed settings."""
    pass


class UnbalancedBranchError(LSystemError):
    def __init__(self, index: int, symbol: str = ']'):
        self.index = index
        self.symbol = symbol
        super().__init__(f"'{symbol}' at position {index} has no matching '['")


def require(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigError(msg)
