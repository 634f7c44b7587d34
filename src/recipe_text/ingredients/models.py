import dataclasses
from typing import Any, Dict, List, Optional

from recipe_text.ingredients.number_utils import parse_amount_value, scale_amount_text
from recipe_text.ingredients.units import normalize_unit


@dataclasses.dataclass(frozen=True)
class Ingredient:
    """One ingredient line split into amount, unit, name and note.

    ``raw`` is the source line without its bullet marker and is the key
    callers use to join matcher output back to this record.
    """

    raw: str
    name: str
    amount: Optional[str] = None
    unit: Optional[str] = None
    note: Optional[str] = None

    @property
    def quantity(self) -> Optional[float]:
        """Numeric value of ``amount``, or None if absent or unparseable."""
        return parse_amount_value(self.amount)

    @property
    def canonical_unit(self) -> Optional[str]:
        return normalize_unit(self.unit) if self.unit else None

    def amount_label(self, multiplier: float = 1.0) -> str:
        """Amount and unit for display, with the amount scaled by ``multiplier``."""
        if not self.amount:
            return ""
        scaled = scale_amount_text(self.amount, multiplier)
        return f"{scaled} {self.unit}" if self.unit else scaled

    def to_dict(self) -> Dict[str, Any]:
        return {
            key: value
            for key, value in dataclasses.asdict(self).items()
            if value is not None
        }


@dataclasses.dataclass
class IngredientSection:
    title: str
    items: List[Ingredient] = dataclasses.field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "items": [item.to_dict() for item in self.items]}
