from enum import Enum
from typing import Any, Callable, Dict, List

Listener = Callable[[Any], None]


class Event(Enum):
    """
    An enumeration of the notifications published after a rebuild.
    """

    APPROXIMATIONS_UPDATED = "approximations-updated"
    GLOBAL_ERROR_UPDATED = "global-error-updated"
    LOCAL_ERROR_UPDATED = "local-error-updated"


class EventPublisher:
    """
    A synchronous publisher notifying the listeners subscribed to an event
    in the order of their subscription.
    """

    def __init__(self):
        self._listeners: Dict[Event, List[Listener]] = {
            event: [] for event in Event
        }

    def subscribe(self, event: Event, listener: Listener):
        """
        Registers a listener for an event.

        :param event: the event to listen to
        :param listener: the function to call with the payload of the event
        """
        if not callable(listener):
            raise TypeError("listener must be callable")
        self._listeners[event].append(listener)

    def unsubscribe(self, event: Event, listener: Listener):
        """
        Removes a previously registered listener.

        :param event: the event the listener is subscribed to
        :param listener: the listener to remove
        """
        try:
            self._listeners[event].remove(listener)
        except ValueError:
            raise ValueError(
                f"listener is not subscribed to {event.value}"
            ) from None

    def publish(self, event: Event, payload: Any):
        """
        Calls every listener of the event with the payload.

        :param event: the event to publish
        :param payload: the data passed to the listeners
        """
        for listener in list(self._listeners[event]):
            listener(payload)
