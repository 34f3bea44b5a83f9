"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when an operation needs a caller identity and none is present."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")


class NotAuthorizedError(DomainError):
    """Raised when a caller lacks permission for the target mutation."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StoreFailureError(DomainError):
    """Raised when a record store call itself fails.

    Repository implementations translate their driver errors into this
    so services never see a storage library's exception types.
    """

    def __init__(self, operation: str, detail: str = ""):
        self.operation = operation
        self.detail = detail
        message = f"Store operation failed: {operation}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class PartialMutationError(StoreFailureError):
    """Raised when a multi-step mutation fails after some steps completed."""

    def __init__(self, operation: str, completed: list[str], failed: str):
        self.completed = completed
        self.failed = failed
        super().__init__(
            operation,
            f"completed={','.join(completed) or 'none'} failed={failed}",
        )
