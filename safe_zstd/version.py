# ==================================================
# safe_zstd/version.py
# ==================================================
from typing import NamedTuple


class VersionInfo(NamedTuple):
    """Library version decoded from the packed ``major*10000 + minor*100 + patch``."""
    major: int
    minor: int
    patch: int

    @classmethod
    def from_number(cls, number: int) -> "VersionInfo":
        return cls(number // 10000, (number // 100) % 100, number % 100)

    @property
    def number(self) -> int:
        return self.major * 10000 + self.minor * 100 + self.patch

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
