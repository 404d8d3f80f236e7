"""Provider base class with mock selection."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that have an in-memory stand-in for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every provider in the container.

    A provider that declares ``__mock_component__`` is an abstract component:
    it has one production subclass and one mock subclass (``__is_mock__``),
    and :meth:`implementation` picks between them. Providers without
    subclasses are used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool = False) -> type["ProviderBase"]:
        """The concrete provider class to instantiate.

        Raises:
            ValueError: If the component lacks the requested implementation
        """
        if not cls.is_mockable():
            return cls

        for subclass in cls.__subclasses__():
            if getattr(subclass, "__is_mock__", False) == use_mock:
                return subclass

        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
