from dataclasses import dataclass

from ..exceptions.domain_exceptions import InvalidTextRangeError


@dataclass(frozen=True)
class TextRange:
    """Immutable half-open interval of UTF-8 byte offsets into a text body."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise InvalidTextRangeError(f"Range start must be >= 0: {self.start}")
        if self.end < self.start:
            raise InvalidTextRangeError(
                f"Range end {self.end} precedes start {self.start}"
            )

    @classmethod
    def covering(cls, text: str) -> "TextRange":
        """Range spanning the whole of ``text``."""
        return cls(start=0, end=len(text.encode("utf-8")))

    @property
    def length(self) -> int:
        return self.end - self.start

    def fits(self, text: str) -> bool:
        """Check the range lies within ``text`` and on character boundaries."""
        encoded = text.encode("utf-8")
        if self.end > len(encoded):
            return False
        try:
            encoded[self.start : self.end].decode("utf-8")
        except UnicodeDecodeError:
            return False
        return True

    def slice(self, text: str) -> str:
        """Return the substring of ``text`` this range selects."""
        if not self.fits(text):
            raise InvalidTextRangeError(
                f"Range {self.start}..{self.end} is not valid for a body of "
                f"{len(text.encode('utf-8'))} bytes"
            )
        return text.encode("utf-8")[self.start : self.end].decode("utf-8")

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"
