"""Provider metadata used to swap real and in-memory implementations."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests may replace with in-memory versions
Component = Literal["persistence"]


class ProviderBase(Provider):
    """dishka provider carrying mock/prod metadata.

    A component base (e.g. ``PersistenceProvider``) sets
    ``__mock_component__``; its subclasses set ``__is_mock__`` to say which
    implementation they are. Concrete providers leave both unset.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
