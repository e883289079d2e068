"""Provider base class and implementation lookup."""

from typing import ClassVar, Literal, Type

from dishka import Provider

from tullamore.util.error import DependencyInjectionError

# Components that tests may swap for in-memory versions
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all Tullamore providers.

    A provider with no subclasses is used as is. A provider that names a
    ``__mock_component__`` is an abstract component: its production and
    mock implementations subclass it and set ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return cls.__mock_component__ is not None and bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool = False) -> Type["ProviderBase"]:
        """Pick the concrete provider class for this component.

        Mock implementations are only registered once their module has been
        imported, so tests import ``tests.di`` before building a container.

        Raises:
            DependencyInjectionError: If no subclass matches ``use_mock``
        """
        if not cls.is_mockable():
            return cls

        for subclass in cls.__subclasses__():
            if subclass.__is_mock__ == use_mock:
                return subclass
        raise DependencyInjectionError(str(cls.__mock_component__), use_mock)
