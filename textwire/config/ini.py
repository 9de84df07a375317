"""
INI reader and writer.

    ; comment
    [section]
    key=value ;trailing comment

Entries are stored flat as 'section.key' -> value. Keys that appear before
any section header are stored under their bare name.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List

from ..exceptions import ConfigParseError, ValidationError
from ..text.wstring import WireString

logger = logging.getLogger(__name__)

HEADER_COMMENT = '; auto-generated by textwire'
LINE_END = '\r\n'


@dataclass
class IniLine:
    """One parsed, non-blank INI line."""
    kind: str  # 'section' or 'entry'
    name: str
    value: str = ''


def parse_line(line: str) -> IniLine:
    """
    Classify one comment-free, non-blank line.

    Args:
        line: Line with comments already removed

    Returns:
        Parsed line

    Raises:
        ValueError: If the line is neither a header nor a key=value entry
    """
    tokens = [t.trim() for t in WireString(line).split_keep('[]=')]
    tokens = [t for t in tokens if t]

    if len(tokens) == 3 and tokens[0] == '[' and tokens[2] == ']':
        return IniLine('section', tokens[1])
    if len(tokens) >= 2 and tokens[1] == '=' and tokens[0] not in ('[', ']', '='):
        # Everything after the first '=' is the value
        return IniLine('entry', tokens[0], line.split('=', 1)[1].strip())
    raise ValueError(f"Expected '[section]' or 'key=value', got: {line.strip()}")


class IniDocument(dict):
    """Flat 'section.key' -> value mapping with INI text conversion."""

    def load(self, text: str) -> bool:
        """
        Replace contents with parsed INI text.

        Args:
            text: INI document

        Returns:
            True on success; on failure the document is left empty
        """
        try:
            self.parse(text)
        except ConfigParseError as e:
            logger.debug(f"INI load failed: {e}")
            self.clear()
            return False
        return True

    def parse(self, text: str) -> 'IniDocument':
        """
        Replace contents with parsed INI text.

        Args:
            text: INI document

        Returns:
            self, for chaining

        Raises:
            ConfigParseError: Listing every malformed line
        """
        entries: Dict[str, str] = {}
        errors: List[ValidationError] = []
        section = ''

        for number, raw in enumerate(text.splitlines(), start=1):
            line = raw.split(';', 1)[0]
            if not line.strip():
                continue
            try:
                parsed = parse_line(line)
            except ValueError as e:
                errors.append(ValidationError(str(e), path=f"line {number}"))
                continue

            if parsed.kind == 'section':
                section = parsed.name
            else:
                entries[f"{section}.{parsed.name}" if section else parsed.name] = parsed.value

        if errors:
            raise ConfigParseError(errors)

        self.clear()
        self.update(entries)
        return self

    def save(self) -> str:
        """
        Render as INI text.

        Returns:
            Text with CRLF line endings. Section-less keys come first, then
            each section in sorted key order.
        """
        lines = [HEADER_COMMENT]
        section = None

        for full_key in sorted(self, key=lambda k: ('.' in k, k)):
            if '.' in full_key:
                key_section, key = full_key.split('.', 1)
            else:
                key_section, key = '', full_key

            if key_section != section:
                section = key_section
                if section:
                    lines.append('')
                    lines.append(f"[{section}]")
            lines.append(f"{key}={self[full_key]}")

        return LINE_END.join(lines) + LINE_END

    def section(self, name: str) -> Dict[str, str]:
        """Return the entries of one section keyed by their bare names."""
        prefix = f"{name}."
        return {k[len(prefix):]: v for k, v in self.items() if k.startswith(prefix)}

    def sections(self) -> List[str]:
        seen: List[str] = []
        for key in self:
            if '.' in key:
                name = key.split('.', 1)[0]
                if name not in seen:
                    seen.append(name)
        return seen

    @classmethod
    def from_text(cls, text: str) -> 'IniDocument':
        """Parse text into a new document, raising ConfigParseError on failure."""
        return cls().parse(text)
