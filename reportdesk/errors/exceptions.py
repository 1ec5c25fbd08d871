"""Exception classes shared by the data-access layer, the API and the dashboard."""


class ReportDeskError(Exception):
    """Base exception for reportdesk."""

    def __init__(self, code: str, message: str, status_code: int = 500):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationError(ReportDeskError):
    """A required field is missing or invalid. Raised before any store call."""

    def __init__(self, message: str):
        super().__init__("VALIDATION_ERROR", message, status_code=400)


class NotFoundError(ReportDeskError):
    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            "NOT_FOUND",
            f"{resource} '{resource_id}' not found",
            status_code=404,
        )


class UnauthenticatedError(ReportDeskError):
    def __init__(self, message: str = "Authentication required"):
        super().__init__("UNAUTHENTICATED", message, status_code=401)


class ForbiddenError(ReportDeskError):
    def __init__(self, message: str = "Not authorized"):
        super().__init__("FORBIDDEN", message, status_code=403)


class StoreError(ReportDeskError):
    """The store call failed (network, permission or constraint violation)."""

    def __init__(self, message: str):
        super().__init__("STORE_ERROR", message, status_code=502)
