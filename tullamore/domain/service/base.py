"""Base class for domain services."""


class Service:
    """Base class for Tullamore domain services.

    A service owns the rules that span a repository call, such as tag
    validation before a question is stored or the single chosen answer
    per question. Services raise domain errors and never HTTP errors.
    """
