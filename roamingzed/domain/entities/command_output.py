from dataclasses import dataclass, field

from ..exceptions.domain_exceptions import InvalidTextRangeError
from ..value_objects.text_range import TextRange


@dataclass(frozen=True)
class OutputSection:
    """A labeled sub-range of a command's output text."""

    range: TextRange
    label: str

    def __post_init__(self) -> None:
        if not self.label or self.label.strip() == "":
            raise InvalidTextRangeError("Section label cannot be empty")


@dataclass(frozen=True)
class CommandOutput:
    """Markdown text returned to the editor plus its labeled sections."""

    text: str
    sections: tuple[OutputSection, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for section in self.sections:
            if not section.range.fits(self.text):
                raise InvalidTextRangeError(
                    f"Section '{section.label}' range {section.range} "
                    "falls outside the output text"
                )

    @classmethod
    def single_section(cls, text: str, label: str) -> "CommandOutput":
        """Output with one section spanning the whole text."""
        return cls(
            text=text,
            sections=(OutputSection(range=TextRange.covering(text), label=label),),
        )

    def section_text(self, index: int = 0) -> str:
        """Text covered by the section at ``index``."""
        return self.sections[index].range.slice(self.text)
