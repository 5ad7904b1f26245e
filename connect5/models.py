from enum import Enum


class DiscColor(str, Enum):
    RED = 'Red'
    BLUE = 'Blue'

    @property
    def symbol(self) -> str:
        """Single letter drawn inside a board cell."""
        return self.value[0]

    def other(self) -> 'DiscColor':
        return DiscColor.BLUE if self is DiscColor.RED else DiscColor.RED

    @classmethod
    def parse(cls, value) -> 'DiscColor':
        """Accept 'Red'/'Blue' in any case; raise ValueError otherwise."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError('Disc color must be either Red or Blue')
        text = value.strip().lower()
        for color in cls:
            if color.value.lower() == text:
                return color
        raise ValueError('Disc color must be either Red or Blue')


class Player:
    def __init__(self, name: str, color: DiscColor):
        self.name = name
        self.color = color

    def __repr__(self):
        return f"Player(name={self.name!r}, color={self.color.value})"

    def to_dict(self):
        return {
            'name': self.name,
            'color': self.color.value,
        }
