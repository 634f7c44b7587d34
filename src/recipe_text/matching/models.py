import dataclasses
from typing import Any, Dict, Mapping, Optional, Sequence, Union


@dataclasses.dataclass(frozen=True)
class MatchInput:
    """An ingredient as the matcher sees it.

    ``original`` is the untouched ingredient line (the join key), ``item`` the
    ingredient name searched for in step text.
    """

    original: str
    item: str

    @classmethod
    def coerce(cls, value: Any) -> "MatchInput":
        """Accept a MatchInput, a mapping with original/item keys or a pair."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(original=str(value["original"]), item=str(value["item"]))
        if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
            return cls(original=str(value[0]), item=str(value[1]))
        raise TypeError(f"Cannot use {value!r} as an ingredient match input")


@dataclasses.dataclass(frozen=True)
class TextToken:
    value: str
    type: str = dataclasses.field(default="text", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "value": self.value}


@dataclasses.dataclass(frozen=True)
class IngredientToken:
    """A mention of an ingredient inside step text."""

    value: str
    ingredient: str
    amount: Optional[str]
    original: str
    type: str = dataclasses.field(default="ingredient", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "value": self.value,
            "ingredient": self.ingredient,
            "amount": self.amount,
            "original": self.original,
        }


SequenceToken = Union[TextToken, IngredientToken]
