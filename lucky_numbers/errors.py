class LotteryError(Exception):
    """Base exception for lottery number operations"""
    pass


class UnknownLotteryError(LotteryError, KeyError):
    """Raised when a lottery id has no registered configuration"""

    def __init__(self, lottery_id: str):
        self.lottery_id = lottery_id
        super().__init__(lottery_id)

    def __str__(self) -> str:
        return f"Unknown lottery: {self.lottery_id!r}"


class ValidationError(LotteryError, ValueError):
    """Raised when a custom combination breaks one of the selection rules.

    `rule` is one of "format", "count", "range" or "duplicate" so callers can
    show an actionable message.
    """

    def __init__(self, rule: str, message: str, values=None):
        self.rule = rule
        self.values = list(values) if values is not None else []
        super().__init__(message)
