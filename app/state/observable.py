from typing import Any, Callable, Generic, List, Optional, TypeVar
from structlog import get_logger

logger = get_logger()

T = TypeVar("T")
Observer = Callable[[Any], None]

class ObservableState(Generic[T]):
    """Single-value holder that notifies its observers whenever a value is set.

    Every ``set_value`` dispatches, even when the new value equals the old one,
    so observers see each publish in order. The initial value is ``None``
    ("unset") unless one is given.
    """

    def __init__(self, initial: Optional[T] = None):
        self._value = initial
        self._observers: List[Observer] = []

    @property
    def value(self) -> Optional[T]:
        return self._value

    def _notify(self, observer: Observer, value: Optional[T]) -> None:
        try:
            observer(value)
        except Exception as e:
            logger.error("Observer failed", observer=repr(observer), error=str(e))

    def set_value(self, value: Optional[T]) -> None:
        self._value = value
        for observer in list(self._observers):
            self._notify(observer, value)

    def subscribe(self, observer: Observer, replay: bool = False) -> Callable[[], None]:
        self._observers.append(observer)
        if replay:
            self._notify(observer, self._value)

        def unsubscribe():
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def as_read_only(self) -> "ReadOnlyState[T]":
        return ReadOnlyState(self)

class ReadOnlyState(Generic[T]):
    """View over an ObservableState that cannot publish."""

    def __init__(self, source: ObservableState[T]):
        self._source = source

    @property
    def value(self) -> Optional[T]:
        return self._source.value

    def subscribe(self, observer: Observer, replay: bool = False) -> Callable[[], None]:
        return self._source.subscribe(observer, replay=replay)
