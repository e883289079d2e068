"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AlreadyExistsError(DomainError):
    """Raised when creating a resource whose identity is already taken."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")


class TagNotFoundError(NotFoundError):
    """Raised when a tag does not exist."""

    def __init__(self, name: str):
        super().__init__("Tag", name)


class TagAlreadyExistsError(AlreadyExistsError):
    """Raised when adding a tag whose name is taken."""

    def __init__(self, name: str):
        super().__init__("Tag", name)


class QuestionNotFoundError(NotFoundError):
    """Raised when a question does not exist."""

    def __init__(self, question_id: str):
        super().__init__("Question", question_id)


class QuestionAlreadyExistsError(AlreadyExistsError):
    """Raised when adding a question whose id is already stored."""

    def __init__(self, question_id: str):
        super().__init__("Question", question_id)


class AnswerNotFoundError(NotFoundError):
    """Raised when an answer does not exist."""

    def __init__(self, answer_id: str):
        super().__init__("Answer", answer_id)


class AnswerAlreadyExistsError(AlreadyExistsError):
    """Raised when adding an answer whose id is already stored."""

    def __init__(self, answer_id: str):
        super().__init__("Answer", answer_id)


class UserNotFoundError(NotFoundError):
    """Raised when a user does not exist."""

    def __init__(self, identifier: str):
        super().__init__("User", identifier)


class UserAlreadyExistsError(AlreadyExistsError):
    """Raised when registering a username that is taken."""

    def __init__(self, username: str):
        super().__init__("User", username)
