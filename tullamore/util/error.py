"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""


class DependencyInjectionError(UtilError):
    """Raised when no provider implementation fits a component."""

    def __init__(self, component: str, use_mock: bool):
        self.component = component
        self.use_mock = use_mock
        kind = "mock" if use_mock else "production"
        super().__init__(f"No {kind} provider registered for {component}")
