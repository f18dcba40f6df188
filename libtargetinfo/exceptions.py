import re


class TargetInfoError(Exception):
    """Parent for all target information errors (exceptions).

    Subclasses describe themselves for user with single line `summary` and optional multi-line `details`.
    """

    @property
    def summary(self) -> str:
        return "Target information error occurred"

    @property
    def details(self) -> str:
        return ""

    @property
    def error_kind(self) -> str:
        """Kebab-case kind of error, e.g `target-not-found` for `TargetNotFoundError`."""
        name = self.__class__.__name__.removesuffix("Error")
        return re.sub(r"(?<!^)(?=[A-Z])", "-", name).lower()

    def __str__(self) -> str:
        message = f"{self.summary}\n\n{self.details}" if self.details else self.summary
        return f"{message}\n\n[{self.error_kind}]"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.summary!r})"
