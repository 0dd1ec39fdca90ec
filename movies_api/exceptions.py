class MovieError(Exception):
    def __init__(self, message: str, status_code: int = 422):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class MovieNotFoundError(MovieError):
    def __init__(self):
        super().__init__("entity with such id does not exist", status_code=404)


class NoFieldsToUpdateError(MovieError):
    def __init__(self):
        super().__init__("no fields to update", status_code=422)


class ServiceError(MovieError):
    """Operation failure annotated with the operation that raised it."""

    def __init__(self, prefix: str, cause: Exception):
        self.cause = cause
        status_code = cause.status_code if isinstance(cause, MovieError) else 422
        super().__init__(f"{prefix}: {cause}", status_code=status_code)
