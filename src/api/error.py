"""API error type

Carries a use-case Error to the HTTP layer. Rendered as
{"error": {"code": ..., "message": ...}} by the handler in src.api.app.
"""

from libs.result import Error


NOT_FOUND_CODES = {
    "ACTIVITY_NOT_FOUND",
    "MODULE_NOT_FOUND",
    "BUDGET_NOT_FOUND",
    "FARMING_YEAR_NOT_FOUND",
    "SCOPE_NOT_FOUND",
    "SUBSCRIPTION_NOT_FOUND",
}


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = 400):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code

    @classmethod
    def from_error(cls, error: Error) -> "ClientError":
        """Not-found codes map to 404, everything else to 400"""
        return cls(error, status_code=404 if error.code in NOT_FOUND_CODES else 400)
