"""Translation errors raised to the caller."""


class TranslationError(Exception):
    """Base exception for translator failures."""

    def __init__(self, message: str, workload: str = ""):
        super().__init__(message)
        self.workload = workload


class SerializationError(TranslationError):
    """Raised when a child cannot be captured as an exact byte payload."""

    def __init__(self, message: str, workload: str = "", index: int | None = None):
        super().__init__(message, workload)
        self.index = index


class StructuralViolationError(TranslationError):
    """Raised when a selected element does not have the expected shape."""

    def __init__(self, message: str, workload: str = "", index: int | None = None):
        super().__init__(message, workload)
        self.index = index


class UnknownTranslatorError(TranslationError, KeyError):
    """Raised when a translator chain names a translator that is not registered."""

    def __init__(self, name: str):
        super().__init__(f"unknown translator '{name}'")
        self.name = name

    def __str__(self):
        return self.args[0]
