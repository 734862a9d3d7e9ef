from dataclasses import dataclass

@dataclass
class Rectangle:
    width: float
    height: float

    def __post_init__(self):
        # the area is fixed by the sides given at construction
        self._sides = (self.width, self.height)

    def get_area(self):
        # instances restored by `from_json` skip __post_init__
        width, height = getattr(self, '_sides', (self.width, self.height))
        return width * height


def make_rectangle(width, height) -> Rectangle:
    """
    No checks are made on either side: the area is whatever `*` gives.
    """
    return Rectangle(width, height)
