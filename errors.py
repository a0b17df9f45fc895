class AutomationError(Exception):
    pass


class ConfigurationError(AutomationError):
    pass


class OperatorAbort(AutomationError):
    """Raised when the operator quits from a prompt or keeps answering wrong."""


class MetadataUploadError(AutomationError):
    pass


class TradeApiError(AutomationError):
    def __init__(self, status: int, message: str):
        super().__init__(f"Trade API returned {status}: {message}")
        self.status = status
        self.message = message


class TokenCreationError(AutomationError):
    pass


class NothingToSellError(AutomationError):
    pass
