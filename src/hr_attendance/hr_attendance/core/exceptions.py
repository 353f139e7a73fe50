class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or request does not exist."""


class AttendanceError(ValidationError):
    """Rejected check-in/check-out. The store is left untouched."""


class AlreadyCheckedIn(AttendanceError):
    def __init__(self, employee_id: str):
        super().__init__("Already checked in")
        self.employee_id = employee_id


class NoActiveShift(AttendanceError):
    def __init__(self, employee_id: str):
        super().__init__("No active shift found")
        self.employee_id = employee_id


class NoOpenSession(AttendanceError):
    def __init__(self, employee_id: str):
        super().__init__("No active session to check out")
        self.employee_id = employee_id
