"""Inline emphasis formatter: markers in, plain text plus style ranges out."""

import re

from mdview.formatting.ir import FormattedText, StyledRange, TextStyle


class InlineFormatter:
    """Resolve ~~strike~~, **bold** and *italic* markers in a single line."""

    # Order matters: strikethrough first, then bold, then italic.
    # ***x*** therefore resolves as bold and then italic by pass order.
    STRIKETHROUGH_PATTERN = re.compile(r"~~(.*?)~~")
    BOLD_PATTERN = re.compile(r"\*\*(.*?)\*\*")
    ITALIC_PATTERN = re.compile(r"(?<!\*)\*(?!\*)(.*?)(?<!\*)\*(?!\*)")

    PASSES: tuple[tuple[re.Pattern, TextStyle], ...] = (
        (STRIKETHROUGH_PATTERN, TextStyle.STRIKETHROUGH),
        (BOLD_PATTERN, TextStyle.BOLD),
        (ITALIC_PATTERN, TextStyle.ITALIC),
    )

    def format(self, line: str) -> FormattedText:
        """Strip emphasis delimiters from a line and record their ranges.

        Args:
            line: Raw text possibly containing emphasis markers

        Returns:
            FormattedText whose ranges index into its plain_text
        """
        text = line
        ranges: list[StyledRange] = []

        for pattern, style in self.PASSES:
            text, ranges = self._apply_pass(text, ranges, pattern, style)

        ranges.sort(key=lambda r: (r.start, r.end, r.style.value))
        return FormattedText(plain_text=text, ranges=tuple(ranges))

    def _apply_pass(
        self,
        text: str,
        ranges: list[StyledRange],
        pattern: re.Pattern,
        style: TextStyle,
    ) -> tuple[str, list[StyledRange]]:
        """Run one family's scan-and-rewrite sweep.

        Matches are replaced rightmost-first so that the start offset of
        every match still to be processed stays valid in the rewritten text.
        All ranges, old and new, are then mapped past the removed
        delimiters so they index into the rewritten text.
        """
        matches = list(pattern.finditer(text))
        if not matches:
            return text, ranges

        removed: list[tuple[int, int]] = []
        added: list[StyledRange] = []

        for match in reversed(matches):
            start, end = match.span()
            inner_start, inner_end = match.span(1)
            text = text[:start] + match.group(1) + text[end:]

            removed.append((start, inner_start))
            removed.append((inner_end, end))
            if inner_end > inner_start:
                added.append(StyledRange(inner_start, inner_end, style))

        shifted = [
            StyledRange(
                _shift(r.start, removed),
                _shift(r.end, removed),
                r.style,
            )
            for r in ranges + added
        ]
        return text, shifted


def _shift(position: int, removed: list[tuple[int, int]]) -> int:
    """Map an offset through the deletion of the given [start, end) spans."""
    offset = 0
    for start, end in removed:
        if position > start:
            offset += min(position, end) - start
    return position - offset


_formatter = InlineFormatter()


def format_inline(line: str) -> FormattedText:
    """Format a single line with the shared formatter instance."""
    return _formatter.format(line)
