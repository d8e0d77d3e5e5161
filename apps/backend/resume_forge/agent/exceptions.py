class ProviderError(RuntimeError):
    """Raised when the underlying LLM provider fails or returns an unusable payload."""


class StrategyError(RuntimeError):
    """
    Raised when a strategy cannot turn the provider output into the requested
    shape. `raw_output` keeps the text the provider returned.
    """

    def __init__(self, message: str, raw_output: str = ""):
        super().__init__(message)
        self.raw_output = raw_output
