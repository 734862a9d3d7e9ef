from dataclasses import dataclass
from enum import Enum

class AttributeOperator(Enum):
    EQUALS = "="
    CONTAINS_WORD = "~="
    DASH_PREFIX = "|="
    BEGINS_WITH = "^="
    ENDS_WITH = "$="
    LIKE = "*="

@dataclass
class Attribute:
    """
    Expression for an attribute selector, without the surrounding brackets.
    A `value` of `None` only tests that the attribute is present.
    """
    key: str
    value: str | None = None
    equivalence: AttributeOperator=AttributeOperator.EQUALS
    case_insensitive: bool = False

    def __str__(self) -> str:
        if self.value is None:
            return self.key
        escaped = self.value.replace('\\', '\\\\').replace('"', '\\"')
        flag = " i" if self.case_insensitive else ""
        return f'{self.key}{self.equivalence.value}"{escaped}"{flag}'
