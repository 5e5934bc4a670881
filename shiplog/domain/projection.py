from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel

from ..routing import setup_event_applying

if TYPE_CHECKING:
    from ..routing import MessageRouter


class Projection(BaseModel):
    """Base class for state derived by folding state events in order.

    Event handling is routed based on method decorators. Use @applies_event
    to mark applier methods; the payload type is read from the annotation of
    the method's first parameter. Applying a payload type without an applier
    raises NotImplementedError.

    Examples:
        >>> class ShipCount(Projection):
        ...     count: int = 0
        ...
        ...     @applies_event
        ...     def apply_enrolled(self, evt: EnrolShip) -> None:
        ...         self.count += 1
        >>>
        >>> counter = ShipCount()
        >>> counter.apply(EnrolShip(ship="hms_hello"))
        >>> counter.count
        1
    """

    _event_router: ClassVar["MessageRouter"]

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Set up event routing when a subclass is defined."""
        super().__init_subclass__(**kwargs)  # type: ignore[arg-type]
        cls._event_router = setup_event_applying(cls)

    @classmethod
    def applied_event_types(cls) -> frozenset[type]:
        """Payload types this projection has an applier for."""
        return cls._event_router.registered_types

    def apply(self, event: BaseModel) -> object:
        """Route an event payload to its registered applier method.

        Args:
            event: The state event to apply.
        """
        return self._event_router.route(self, event)
