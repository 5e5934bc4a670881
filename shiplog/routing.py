import inspect
from collections.abc import Callable
from functools import singledispatch
from typing import Any, TypeVar

T = TypeVar("T")

_APPLIER_MARKER = "_is_event_applier"
_APPLIER_TYPE = "_applies_event_type"


def _extract_handler_type(func: Callable[..., Any]) -> type:
    """Read the payload type from the annotation of a method's first argument.

    Raises:
        ValueError: If the parameter is missing or not annotated with a class.
    """
    func_name = getattr(func, "__name__", repr(func))
    params = list(inspect.signature(func).parameters.values())
    if len(params) < 2:
        raise ValueError(f"Handler {func_name} must have at least 2 parameters")

    param = params[1]
    if param.annotation is inspect.Parameter.empty:
        raise ValueError(
            f"Handler {func_name} parameter '{param.name}' must have a type annotation"
        )
    if not isinstance(param.annotation, type):
        raise ValueError(
            f"Handler {func_name} parameter '{param.name}' must be annotated with a class, "
            f"got {param.annotation!r}"
        )
    return param.annotation


class MessageRouter:
    """Dispatches event payloads to appliers registered by payload type.

    Payload types without an applier raise NotImplementedError.
    """

    __slots__ = ("_dispatch",)

    def __init__(self, operation_name: str = "event applier"):
        @singledispatch
        def dispatch(message: object, instance: object) -> object:
            raise NotImplementedError(
                f"No {operation_name} registered for {type(message).__name__} "
                f"on {type(instance).__name__}"
            )

        self._dispatch = dispatch

    def register(self, message_type: type, handler: Callable[..., object]) -> None:
        # singledispatch dispatches on the first argument, handlers take self first
        def wrapper(msg: object, inst: object, h: Any = handler) -> object:
            return h(inst, msg)

        self._dispatch.register(message_type)(wrapper)

    @property
    def registered_types(self) -> frozenset[type]:
        """Payload types that have an explicit applier."""
        return frozenset(t for t in self._dispatch.registry if t is not object)

    def route(self, instance: Any, message: Any) -> object:
        return self._dispatch(message, instance)


def applies_event(func: Callable[..., T]) -> Callable[..., T]:
    """Decorator marking a method as an event applier.

    The event type is automatically extracted from the method's type annotation.

    Example:
        >>> class Fleet(Projection):
        ...     @applies_event
        ...     def apply_enrol_ship(self, evt: EnrolShip) -> None:
        ...         self.ships[evt.ship] = Ship(name=evt.ship)
    """
    setattr(func, _APPLIER_TYPE, _extract_handler_type(func))
    setattr(func, _APPLIER_MARKER, True)
    return func


def setup_event_applying(cls: type) -> MessageRouter:
    """Build the applier routing table for a class.

    Scans the class hierarchy for @applies_event methods, base classes first
    so that subclass appliers win.
    """
    router = MessageRouter()
    for klass in reversed(cls.__mro__):
        for value in klass.__dict__.values():
            if inspect.isfunction(value) and getattr(value, _APPLIER_MARKER, False):
                router.register(getattr(value, _APPLIER_TYPE), value)
    return router
