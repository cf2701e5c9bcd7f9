class PostboardError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(PostboardError):
    """Requested resource does not exist."""


class AuthError(PostboardError):
    """The auth collaborator rejected or could not verify the session."""
