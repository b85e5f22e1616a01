"""ShoppingList aggregate: ingredient name -> required quantity, in first-seen order."""
from typing import Dict, List, Tuple


class ShoppingList:
    def __init__(self):
        self.items: Dict[str, int] = {}

    def add_item(self, name: str, quantity: int = 1):
        '''
        Adds ``quantity`` of an ingredient; repeated names accumulate.
        '''
        if quantity < 1:
            raise ValueError(f"Quantity must be positive: {quantity}")
        self.items[name] = self.items.get(name, 0) + quantity

    def quantity(self, name: str) -> int:
        return self.items.get(name, 0)

    def get_items(self) -> List[Tuple[str, int]]:
        '''
        Returns (name, quantity) pairs in insertion order.
        '''
        return list(self.items.items())

    def to_lines(self, legacy: bool = False) -> List[str]:
        '''
        Formats one line per ingredient: ``name`` or ``name xN``.
        In legacy mode multi-quantity lines are not newline terminated.
        '''
        lines = []
        for name, qty in self.items.items():
            if qty == 1:
                lines.append(f"{name}\n")
            elif legacy:
                lines.append(f"{name} x{qty}")
            else:
                lines.append(f"{name} x{qty}\n")
        return lines

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(f"{n} x{q}" for n, q in self.items.items())
        return f"Shopping List Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()
