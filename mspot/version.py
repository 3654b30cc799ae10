"""Three-part software version."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Version:
    """A major.minor.revision version; major and minor are bytes, revision 16 bits."""

    major: int
    minor: int
    revision: int

    def __post_init__(self) -> None:
        for name, limit in (("major", 0xFF), ("minor", 0xFF), ("revision", 0xFFFF)):
            value = getattr(self, name)
            if not 0 <= value <= limit:
                raise ValueError(f"{name} must be between 0 and {limit}, got {value}")

    @property
    def value(self) -> int:
        """The version packed into one integer."""
        return (self.major << 24) | (self.minor << 16) | self.revision

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.revision}"