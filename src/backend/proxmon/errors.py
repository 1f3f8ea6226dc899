"""Proxmox Monitor error hierarchy.

Service and repository errors inherit from ProxmonError. The exception
handlers in main.py turn them into structured JSON responses carrying the
HTTP status code and the request_id of the failing request.
"""


class ProxmonError(Exception):
    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ProxmonError):
    status_code = 404
    code = "NOT_FOUND"


class ValidationError(ProxmonError):
    status_code = 400
    code = "VALIDATION_ERROR"
