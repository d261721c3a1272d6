"""Domain errors raised by the request-handling layer.

Every error knows its HTTP status and the JSON body it renders to, so the
handlers registered in `backend.core.error_handlers` stay generic.
"""

ACCESS_DENIED_MESSAGE = "Access Denied"


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_response(self) -> dict:
        return {"message": self.message}


class AuthenticationFailure(ApiError):
    """Rejected credentials. `reason` is for the logs only."""
    status_code = 401

    def __init__(self, reason: str):
        super().__init__(ACCESS_DENIED_MESSAGE)
        self.reason = reason


class ValidationFailure(ApiError):
    status_code = 400

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)

    def to_response(self) -> dict:
        return {"errors": self.errors}


class ConflictFailure(ApiError):
    status_code = 400

    def to_response(self) -> dict:
        return {"Error": self.message}


class StoreConstraintFailure(ApiError):
    status_code = 400

    def to_response(self) -> dict:
        return {"Validation Error": self.message}


class CourseNotFound(ApiError):
    status_code = 404

    def __init__(self, course_id: int):
        super().__init__("Course Not Found")
        self.course_id = course_id
