"""Domain exceptions raised by source-model collaborators."""


class PositionResolutionFailure(Exception):
    """A source-model element could not be mapped to a line/column range."""

    def __init__(self, element_name: str, reason: str) -> None:
        super().__init__(f"Cannot resolve position of '{element_name}': {reason}")
        self.element_name = element_name
        self.reason = reason


class SourceParseError(Exception):
    """A source file could not be parsed into a compilation unit."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
