class ServiceError(Exception):
    """Base exception for service errors"""

    pass


class NotFoundError(ServiceError):
    """Requested record does not exist"""

    pass


class PermissionDeniedError(ServiceError):
    """Record exists but belongs to another user"""

    pass


class BusinessRuleViolationError(ServiceError):
    """Input is well-formed but breaks a domain rule"""

    pass


class ConflictError(ServiceError):
    """Unique value already taken"""

    pass


class OrchestrationError(ServiceError):
    """A step of a multi-entity workflow produced no result"""

    pass
