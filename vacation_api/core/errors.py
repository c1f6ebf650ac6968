class VacationError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class InvalidCredentials(VacationError):
    status_code = 401


class PermissionDenied(VacationError):
    status_code = 403


class NotFound(VacationError):
    status_code = 404


class DuplicateEmail(VacationError):
    status_code = 409


class InvalidTransition(VacationError):
    status_code = 409


class InvalidInput(VacationError):
    status_code = 422
