"""Exception hierarchy for the DiaLens lens."""


class LensError(Exception):
    """Base exception for all lens errors."""


class InvalidDocument(LensError):
    """Raised when the ePI bundle is missing or has no entries."""


class NoCompositionFound(LensError):
    """Raised when the bundle has entries but none of them is a Composition."""


class RenderingFailure(LensError):
    """Raised when the HTML document is empty or unusable after injection."""

    def __init__(self, message: str, html: str = "") -> None:
        super().__init__(message)
        self.html = html
