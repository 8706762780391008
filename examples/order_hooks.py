"""Example wiring: order lifecycle hooks with priorities and a subscriber.

Run ``dispatchkit-inspect examples.order_hooks`` from the repository root to
see the resulting dispatch order, or execute this file directly.
"""

from __future__ import annotations

import logging

from dispatchkit import DispatcherConfig, EventArgs, EventDispatcher, build_dispatcher
from dispatchkit.config import configure_logging

PRE_PLACE = "prePlace"
POST_PLACE = "postPlace"

logger = logging.getLogger(__name__)


def reject_empty_orders(args: EventArgs) -> None:
    if not getattr(args, "items", None):
        args.rejected = True
        args.stop_propagation()


def reserve_stock(args: EventArgs) -> None:
    logger.info("Reserving %d item(s)", len(args.items))


class AuditSubscriber:
    """Records every order lifecycle event it sees."""

    def __init__(self) -> None:
        self.entries: list[str] = []

    def get_subscribed_events(self) -> tuple[str, ...]:
        return (PRE_PLACE, POST_PLACE)

    def prePlace(self, args: EventArgs) -> None:
        self.entries.append(f"pre:{len(getattr(args, 'items', ()))}")

    def postPlace(self, args: EventArgs) -> None:
        self.entries.append("post")


def register(dispatcher: EventDispatcher) -> None:
    dispatcher.add_listener(PRE_PLACE, reject_empty_orders, priority=100)
    dispatcher.add_listener(PRE_PLACE, reserve_stock)
    dispatcher.add_subscriber(AuditSubscriber(), priority=-10)


def main() -> None:
    config = DispatcherConfig.from_env()
    configure_logging(config.log_level)
    dispatcher = build_dispatcher(config)
    register(dispatcher)

    for items in (["book", "pen"], []):
        args = dispatcher.dispatch(PRE_PLACE, EventArgs(items=items, rejected=False))
        print(f"items={items!r} rejected={args.rejected}")


if __name__ == "__main__":
    main()
