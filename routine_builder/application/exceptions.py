class LLMUpstreamError(RuntimeError):
    """Raised when the LLM provider or chat proxy fails (network errors, non-2xx responses)."""
    pass


class LLMContractError(RuntimeError):
    """Raised when the LLM provider answers with something unusable (empty or malformed)."""
    pass


class SearchNotConfiguredError(RuntimeError):
    """Raised when no search backend has credentials configured."""
    pass


class SearchUpstreamError(RuntimeError):
    """Raised when a search provider call fails."""
    pass


class ConfigurationError(RuntimeError):
    """Raised when a required endpoint URL or credential is missing."""
    pass


class CatalogLoadError(RuntimeError):
    """Raised when the product catalog cannot be fetched or parsed."""
    pass
