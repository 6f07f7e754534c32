"""Line-Item Normalizer.

Maps trade entries onto the uniform LineItem shape and merges them with
macro items so one item set can be passed to the totals calculator.
"""

from typing import Iterable, List

from models.line_item import TRADE_KEY_PREFIX, LineItem, TradeItem


def to_line_items(trades: Iterable[TradeItem]) -> List[LineItem]:
    """Convert trade items into line items.

    The unit kind is dropped and the key gets the "trade:" namespace.
    """
    return [
        LineItem(
            key=f"{TRADE_KEY_PREFIX}{trade.key}",
            label=trade.label,
            sf=trade.qty,
            unit=trade.unit.model_copy(),
        )
        for trade in trades
    ]


def merge_items(macro: Iterable[LineItem], trades: Iterable[TradeItem]) -> List[LineItem]:
    """Macro items first, then normalized trades; order kept within each group."""
    return [*macro, *to_line_items(trades)]
