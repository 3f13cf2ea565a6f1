"""
Content parser.

Turns raw generated program text into a flat, ordered StructuredDocument.

Blocks are separated by blank lines. A block whose first line starts with
an upper-case weekday is a day block and is parsed line by line; any other
block becomes a single PLAIN section.

Sandi Metz Principles:
- Single Responsibility: Text -> tagged sections
- Pure: No I/O, no shared state
- Small methods: One rule per method
"""

import re
from typing import List, Optional

from coachgen.models.document import Section, SectionKind, StructuredDocument

DAY_TOKENS = (
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
)

FOCUS_PREFIX = "Focus:"

BLOCK_SEPARATOR = re.compile(r"\n[ \t]*\n")
# "Warm-Up (10 minutes)", "Sprint Work – Acceleration (20 minutes)",
# "Strength Training (Gym) (45 minutes)": label, then a parenthesised
# expression holding a number. Bullet glyphs never open a label.
SUBHEADING_PATTERN = re.compile(
    r"^[^\s(•*\-](?:[^()]|\([^()]*\))*?\s\([^()]*\d[^()]*\)$"
)
# "Squats: 4 sets x 6 reps", "3x200m: 30s rest", "Note, important: hydrate"
LABELED_DETAIL_PATTERN = re.compile(r"^[^\s(•*\-][^:]*:\s*\S.*$")
BULLET_GLYPHS = ("•", "-", "*")


class ContentParser:
    """
    Parser for raw program text.

    parse() is total: any string yields a document, possibly empty.
    """

    def parse(self, text: Optional[str]) -> StructuredDocument:
        """
        Parse raw text into a structured document.

        Args:
            text: Raw generated text

        Returns:
            Document whose sections mirror input order
        """
        if not text or not text.strip():
            return StructuredDocument()

        sections: List[Section] = []
        for block in self._split_blocks(text):
            sections.extend(self._parse_block(block))
        return StructuredDocument(sections=sections)

    @staticmethod
    def _split_blocks(text: str) -> List[str]:
        """Split text on blank lines, dropping empty blocks."""
        normalized = text.replace("\r\n", "\n").replace("\r", "\n")
        blocks = BLOCK_SEPARATOR.split(normalized)
        return [block.strip("\n") for block in blocks if block.strip()]

    def _parse_block(self, block: str) -> List[Section]:
        """Parse one block."""
        lines = [line.strip() for line in block.split("\n") if line.strip()]
        if not self._is_day_header(lines[0]):
            return [Section(kind=SectionKind.PLAIN, text=block.strip())]
        return self._parse_day_block(lines)

    def _parse_day_block(self, lines: List[str]) -> List[Section]:
        """Parse a block opened by a day header."""
        day = lines[0]
        sections = [Section(kind=SectionKind.DAY_HEADER, text=day, parent_day=day)]
        focus_seen = False

        for line in lines[1:]:
            if not focus_seen and line.startswith(FOCUS_PREFIX):
                focus_seen = True
                kind = SectionKind.FOCUS_LINE
            else:
                kind = self.classify_line(line)
            sections.append(Section(kind=kind, text=line, parent_day=day))

        return sections

    @staticmethod
    def classify_line(line: str) -> SectionKind:
        """
        Classify a day-block content line.

        Rules run in priority order: subheading, labeled detail,
        bullet, plain.

        Args:
            line: Stripped line

        Returns:
            Section kind
        """
        if SUBHEADING_PATTERN.match(line):
            return SectionKind.SUBHEADING
        if LABELED_DETAIL_PATTERN.match(line):
            return SectionKind.BULLET_DETAIL
        if line.startswith(BULLET_GLYPHS):
            return SectionKind.BULLET_DETAIL
        return SectionKind.PLAIN

    @staticmethod
    def _is_day_header(line: str) -> bool:
        return line.startswith(DAY_TOKENS)
