class DomainError(Exception):
    code: str = "domain_error"
    status: int = 400

    def __init__(self, message: str = "", *, code: str | None = None, status: int | None = None):
        super().__init__(message or self.__class__.__name__)
        if code: self.code = code
        if status: self.status = status

class ValidationFailed(DomainError):
    code = "validation_error"
    status = 400

class Unauthorized(DomainError):
    code = "unauthorized"
    status = 401

class NotFound(DomainError):
    code = "not_found"
    status = 404

class Conflict(DomainError):
    code = "conflict"
    status = 409

class RecommendationError(DomainError):
    code = "recommendation_failed"
    status = 500
