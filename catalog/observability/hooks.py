"""
Event hooks for the pattern catalog.

External code can subscribe to catalog lifecycle events (a demo starting,
finishing or failing) without touching the runner.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional


class CatalogEvent(Enum):
    """Event types that can be hooked into."""

    # Registry events
    DEMO_REGISTERED = "demo_registered"

    # Demo lifecycle events
    DEMO_START = "demo_start"
    DEMO_END = "demo_end"
    DEMO_ERROR = "demo_error"

    # Batch runs (category / all)
    CATALOG_START = "catalog_start"
    CATALOG_END = "catalog_end"

    CUSTOM = "custom"


@dataclass
class EventData:
    """Data payload for an event.

    Attributes:
        event: The event type
        timestamp: When the event occurred
        demo_name: Name of the demo (if applicable)
        session_id: Session identifier
        data: Additional event-specific data
        error: Error information (if applicable)
        duration_ms: Duration of the operation (if applicable)
    """

    event: CatalogEvent
    timestamp: datetime = field(default_factory=datetime.now)
    demo_name: Optional[str] = None
    session_id: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)
    error: Optional[Exception] = None
    duration_ms: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert event data to dictionary.

        Returns:
            Dictionary representation of the event
        """
        result: Dict[str, Any] = {
            "event": self.event.value,
            "timestamp": self.timestamp.isoformat(),
        }

        if self.demo_name:
            result["demo_name"] = self.demo_name
        if self.session_id:
            result["session_id"] = self.session_id
        if self.data:
            result["data"] = self.data
        if self.error:
            result["error"] = str(self.error)
        if self.duration_ms is not None:
            result["duration_ms"] = self.duration_ms

        return result


_EVENT_FIELDS = ("demo_name", "session_id", "error", "duration_ms")


def _build_event(
    event: CatalogEvent, payload: Dict[str, Any], kwargs: Dict[str, Any]
) -> EventData:
    fields = {key: kwargs.pop(key) for key in _EVENT_FIELDS if key in kwargs}
    return EventData(event=event, data={**payload, **kwargs}, **fields)


HookCallback = Callable[[EventData], None]


class EventHookRegistry:
    """Registry for event hooks.

    Usage:
        registry = EventHookRegistry()
        registry.on(CatalogEvent.DEMO_START, my_callback)
        registry.on_all(my_universal_callback)
        registry.trigger(CatalogEvent.DEMO_START, demo_name="observer")
        registry.off(CatalogEvent.DEMO_START, my_callback)
    """

    def __init__(self) -> None:
        self._hooks: Dict[CatalogEvent, List[HookCallback]] = {}
        self._global_hooks: List[HookCallback] = []
        self._enabled: bool = True

    def on(self, event: CatalogEvent, callback: HookCallback) -> None:
        """Subscribe to a specific event.

        Args:
            event: Event type to subscribe to
            callback: Function to call when event occurs
        """
        callbacks = self._hooks.setdefault(event, [])
        if callback not in callbacks:
            callbacks.append(callback)

    def on_all(self, callback: HookCallback) -> None:
        """Subscribe to all events."""
        if callback not in self._global_hooks:
            self._global_hooks.append(callback)

    def off(self, event: CatalogEvent, callback: HookCallback) -> None:
        """Unsubscribe from a specific event.

        Args:
            event: Event type to unsubscribe from
            callback: Callback to remove
        """
        if event in self._hooks and callback in self._hooks[event]:
            self._hooks[event].remove(callback)

    def clear(self, event: Optional[CatalogEvent] = None) -> None:
        """Clear hooks for an event or all events.

        Args:
            event: Specific event to clear, or None for all
        """
        if event:
            self._hooks[event] = []
        else:
            self._hooks.clear()
            self._global_hooks.clear()

    def trigger(
        self,
        event: CatalogEvent,
        data: Optional[EventData | Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> None:
        """Trigger an event and call all registered callbacks.

        ``data`` may be a ready EventData, or a dict that becomes the
        payload's ``data``. Keyword arguments matching an EventData field
        (demo_name, session_id, error, duration_ms) set that field; any
        other keyword is added to the payload's ``data``.
        """
        if not self._enabled:
            return

        if not isinstance(data, EventData):
            data = _build_event(event, data or {}, kwargs)

        for callback in self._hooks.get(event, []) + self._global_hooks:
            try:
                callback(data)
            except (TypeError, ValueError, RuntimeError, AttributeError):
                # a failing hook never interrupts a demo run
                pass

    def enable(self) -> None:
        """Enable event triggering."""
        self._enabled = True

    def disable(self) -> None:
        """Disable event triggering (hooks won't be called)."""
        self._enabled = False

    @property
    def is_enabled(self) -> bool:
        """Check if event triggering is enabled."""
        return self._enabled

    def list_hooks(self, event: Optional[CatalogEvent] = None) -> Dict[str, int]:
        """List registered hooks.

        Args:
            event: Specific event to list, or None for all

        Returns:
            Dictionary of event -> hook count
        """
        if event:
            return {event.value: len(self._hooks.get(event, []))}

        result = {e.value: len(hooks) for e, hooks in self._hooks.items()}
        result["_global"] = len(self._global_hooks)
        return result


# Default global hook registry
default_hook_registry = EventHookRegistry()
