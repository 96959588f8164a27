"""Event publishing port."""

from agora.domain.model.event import DomainEvent


class EventPublisher:
    """Pushes chatroom events to connected clients.

    Publishing is best-effort notification: the mutation that produced the
    event has already been committed, so implementations must not raise
    for delivery failures.
    """

    async def publish(self, event: DomainEvent) -> None:
        """Deliver an event to every live connection.

        Args:
            event: Event to deliver
        """
        raise NotImplementedError
