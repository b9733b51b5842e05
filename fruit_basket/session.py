"""
Interactive basket session.

One session asks for fruit names forever, adds every known fruit to the
basket and reports the new total. Unknown names are reported and ignored.
The only way out is a RetryBudgetExhausted from the console (or the process
being stopped).
"""

from __future__ import annotations

import logging
import uuid
from enum import Enum
from typing import Optional

from fruit_basket.config import ShopConfig
from fruit_basket.console import Console
from fruit_basket.errors import RetryBudgetExhausted
from fruit_basket.logger import SessionLogger
from fruit_basket.pricing import Basket

logger = logging.getLogger(__name__)

UNKNOWN_ITEM_MESSAGE = "unknown fruit: {label}"


class SessionState(Enum):
    """States of the ask/resolve/report cycle."""
    AWAITING_INPUT = "awaiting_input"
    ITEM_KNOWN = "item_known"
    ITEM_UNKNOWN = "item_unknown"
    PRICE_REPORTED = "price_reported"
    ABORTED = "aborted"


class Session:
    """Drive one basket through the console."""

    def __init__(
        self,
        console: Console,
        config: ShopConfig,
        event_log: Optional[SessionLogger] = None,
    ) -> None:
        self.console = console
        self.config = config
        self.event_log = event_log or SessionLogger()
        self.basket = Basket()
        self.state = SessionState.AWAITING_INPUT
        self.session_id = uuid.uuid4().hex[:12]

    def total(self) -> int:
        """Current basket total, recomputed from scratch."""
        return self.basket.price(self.config.discounts)

    def step(self) -> Optional[int]:
        """
        Run one ask/resolve/report cycle.

        Returns:
            The new total, or None when the answer named no known fruit.

        Raises:
            RetryBudgetExhausted: If the console gave up on the question.
        """
        self.state = SessionState.AWAITING_INPUT
        label = self.console.ask()

        item = self.config.catalog.resolve(label)
        if item is None:
            self.state = SessionState.ITEM_UNKNOWN
            self.console.write_line(UNKNOWN_ITEM_MESSAGE.format(label=label))
            self.event_log.info("unknown_item", {"label": label})
            return None

        self.state = SessionState.ITEM_KNOWN
        self.basket.add(item)
        total = self.total()
        self.console.write_line(str(total))
        self.state = SessionState.PRICE_REPORTED
        logger.debug("Added %s, basket size %d, total %d", item.item_id, len(self.basket), total)
        self.event_log.info(
            "item_added",
            {"item": item.item_id, "label": label, "count": len(self.basket), "total": total},
        )
        return total

    def run(self) -> None:
        """Loop until the console's retry budget runs out. Never returns normally."""
        with self.event_log.session_context(self.session_id):
            try:
                while True:
                    self.step()
            except RetryBudgetExhausted as e:
                self.state = SessionState.ABORTED
                self.event_log.error(
                    "session_aborted",
                    {
                        "attempts": e.attempts,
                        "failures": [failure.name for failure in e.failures],
                        "basket_size": len(self.basket),
                    },
                )
                raise
