"""
Order price calculation.

A dish's ``options`` catalogue lists what can be picked and what it costs:

    [{"name": "Size", "choices": [{"name": "L", "extra": 2}]},
     {"name": "Pickle", "extra": 1}]

An order item's ``options`` lists what the customer picked:

    [{"name": "Size", "choice": "L"}, {"name": "Pickle"}]

An option with its own ``extra`` costs that amount whenever it is picked;
otherwise the extra of the matching choice applies. Picks that don't match
the catalogue cost nothing.

Usage:
    from orders.calculators import OrderCalculator
    total = OrderCalculator().add(dish, options).total
"""
from typing import Any, Dict, List, Optional


class OrderCalculator:
    """Accumulates an order total one item at a time."""

    def __init__(self):
        self.total = 0

    def add(self, dish, selected_options: Optional[List[Dict[str, Any]]] = None) -> "OrderCalculator":
        self.total += self.item_price(dish, selected_options)
        return self

    @classmethod
    def item_price(cls, dish, selected_options: Optional[List[Dict[str, Any]]] = None) -> int:
        price = dish.price
        for selected in selected_options or []:
            price += cls.option_extra(dish.options or [], selected)
        return price

    @staticmethod
    def option_extra(catalogue: List[Dict[str, Any]], selected: Dict[str, Any]) -> int:
        option = next((o for o in catalogue if o.get("name") == selected.get("name")), None)
        if option is None:
            return 0

        if option.get("extra"):
            return option["extra"]

        choice_name = selected.get("choice")
        if not choice_name:
            return 0

        choice = next(
            (c for c in option.get("choices") or [] if c.get("name") == choice_name),
            None,
        )
        if choice is None:
            return 0
        return choice.get("extra") or 0
