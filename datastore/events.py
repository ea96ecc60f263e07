from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from utils.gds_logger import get_logger

logger = get_logger()


@dataclass
class DataStoreEvent:
    type: str
    target: Any
    payload: Dict[str, Any] = field(default_factory=dict)
    default_prevented: bool = False

    def __getitem__(self, key):
        return self.payload[key]

    def get(self, key, default=None):
        return self.payload.get(key, default)

    def prevent_default(self):
        self.default_prevented = True


Listener = Callable[[DataStoreEvent], Any]


class EventEmitter:
    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = {}

    def on(self, event_type: str, listener: Listener) -> Callable[[], None]:
        """
        Registers `listener` for `event_type` and returns a function removing it again.
        """
        self._listeners.setdefault(event_type, []).append(listener)

        def remove():
            self.off(event_type, listener)

        return remove

    def off(self, event_type: str, listener: Optional[Listener] = None):
        if listener is None:
            self._listeners.pop(event_type, None)
            return
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def listeners(self, event_type: str) -> List[Listener]:
        return list(self._listeners.get(event_type, []))

    def fire_event(
        self, event_type: str, payload: Optional[dict] = None, default: Optional[Callable[[DataStoreEvent], Any]] = None
    ) -> DataStoreEvent:
        """
        Calls every listener of `event_type` in registration order, then `default`
        unless one of the listeners called `event.prevent_default()`.
        A failing listener is logged and does not stop the others.
        """
        event = DataStoreEvent(type=event_type, target=self, payload=dict(payload or {}))
        for listener in self.listeners(event_type):
            try:
                listener(event)
            except Exception:
                logger.exception(f"'{event_type}' listener {listener!r} failed")
        if default is not None and not event.default_prevented:
            default(event)
        elif event.default_prevented:
            logger.debug(f"'{event_type}' default action prevented by a listener")
        return event
