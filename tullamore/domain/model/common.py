"""Base model for Tullamore domain entities."""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

ModelT = TypeVar("ModelT", bound="DomainModel")


class DomainModel(BaseModel):
    """Immutable base for users, tags, questions and answers.

    Entities are never mutated in place; services derive a new instance
    with ``with_changes`` and hand it to a repository.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def with_changes(self: ModelT, **changes: Any) -> ModelT:
        """Return a validated copy with the given fields replaced.

        Unlike ``model_copy(update=...)`` the result is re-validated, so
        model invariants still hold after the change.
        """
        return self.__class__(**{**dict(self), **changes})
