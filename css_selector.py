from enum import Enum
from attributes import Attribute


class SelectorError(ValueError):
    """Base class for selectors assembled in an illegal way"""


class OrderViolation(SelectorError):
    def __init__(self):
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )


class DuplicateSingleton(SelectorError):
    def __init__(self):
        super().__init__(
            "Element, id and pseudo-element should not occur more than one time inside the selector"
        )


class Fragment(Enum):
    """
    The kinds of simple selector, valued by the rank they must appear in.
    """
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def singleton(self) -> bool:
        return self in (Fragment.ELEMENT, Fragment.ID, Fragment.PSEUDO_ELEMENT)

    def render(self, value) -> str:
        return _TEMPLATES[self].format(value)

    @classmethod
    def from_name(cls, name: str) -> 'Fragment':
        """
        Look up a kind by its CSS name e.g. `pseudo-class`
        """
        try:
            return cls[name.upper().replace('-', '_')]
        except KeyError:
            raise ValueError(f"Unknown selector part {name!r}") from None


_TEMPLATES = {
    Fragment.ELEMENT: "{}",
    Fragment.ID: "#{}",
    Fragment.CLASS: ".{}",
    Fragment.ATTRIBUTE: "[{}]",
    Fragment.PSEUDO_CLASS: ":{}",
    Fragment.PSEUDO_ELEMENT: "::{}",
}


class Selector:
    """
    Fluent builder for a CSS selector.

    Parts must be added in the order element, id, class, attribute,
    pseudo-class, pseudo-element, and element, id and pseudo-element
    may each be added once. Every method returns the builder itself.
    """
    def __init__(self):
        self._text = ""
        self.last_rank: int | None = None
        self.seen_singletons: set[Fragment] = set()

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._text!r})"

    def stringify(self) -> str:
        return self._text

    def add(self, fragment: Fragment, value) -> 'Selector':
        """
        Validate and append a single part
        """
        self._check_order(fragment)
        self.last_rank = fragment.value
        if fragment.singleton:
            self.seen_singletons.add(fragment)
        self._text += fragment.render(value)
        return self

    def element(self, value: str) -> 'Selector':
        return self.add(Fragment.ELEMENT, value)

    def id(self, value: str) -> 'Selector':
        return self.add(Fragment.ID, value)

    def class_(self, value: str) -> 'Selector':
        return self.add(Fragment.CLASS, value)

    def attr(self, value: str | Attribute) -> 'Selector':
        return self.add(Fragment.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> 'Selector':
        return self.add(Fragment.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> 'Selector':
        return self.add(Fragment.PSEUDO_ELEMENT, value)

    def combine(self, selector_a: 'Selector', combinator: str, selector_b: 'Selector') -> 'Selector':
        """
        Join two selectors with a combinator such as ' ', '+', '~' or '>'.

        The combinator is not checked, and neither operand has to be complete.
        """
        self._text += f"{selector_a.stringify()} {combinator} {selector_b.stringify()}"
        return self

    def _check_order(self, fragment: Fragment):
        if self.last_rank is not None and fragment.value < self.last_rank:
            raise OrderViolation()
        if fragment in self.seen_singletons:
            raise DuplicateSingleton()


class CssSelectorBuilder:
    """
    Facade: every call starts a new `Selector`
    """
    @staticmethod
    def element(value: str) -> Selector:
        return Selector().element(value)

    @staticmethod
    def id(value: str) -> Selector:
        return Selector().id(value)

    @staticmethod
    def class_(value: str) -> Selector:
        return Selector().class_(value)

    @staticmethod
    def attr(value: str | Attribute) -> Selector:
        return Selector().attr(value)

    @staticmethod
    def pseudo_class(value: str) -> Selector:
        return Selector().pseudo_class(value)

    @staticmethod
    def pseudo_element(value: str) -> Selector:
        return Selector().pseudo_element(value)

    @staticmethod
    def combine(selector_a: Selector, combinator: str, selector_b: Selector) -> Selector:
        return Selector().combine(selector_a, combinator, selector_b)


css_selector_builder = CssSelectorBuilder()
