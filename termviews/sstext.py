"""Text with simple in-line style markup."""

from __future__ import annotations

from .text import Text
from .widget import STYLE_DEFAULT, Style


class SimpleStyledText(Text):
    """Text whose styling is given by %-escapes within the string.

    ``%%`` emits a percent sign; ``%<letter>`` switches to the style
    registered for that letter.  Predefined: N normal, S standout
    (reverse), U underline, B bold.  Styles do not combine.
    """

    def __init__(self) -> None:
        super().__init__()
        self._markup_styles: dict[str, Style] = {
            "N": STYLE_DEFAULT,
            "S": STYLE_DEFAULT.reverse(True),
            "U": STYLE_DEFAULT.underline(True),
            "B": STYLE_DEFAULT.bold(True),
        }
        self._markup = ""

    @property
    def markup(self) -> str:
        """The text as set, including markup."""
        return self._markup

    def set_markup(self, s: str) -> None:
        """Set the text from a marked-up string."""
        chars: list[str] = []
        styles: list[Style] = []
        style = self.lookup_style("N")
        escaped = False
        for ch in s:
            if escaped:
                escaped = False
                if ch == "%":
                    chars.append("%")
                    styles.append(style)
                else:
                    style = self.lookup_style(ch)
                continue
            if ch == "%":
                escaped = True
                continue
            chars.append(ch)
            styles.append(style)

        self.set_text("".join(chars))
        for pos, char_style in enumerate(styles):
            self.set_style_at(pos, char_style)
        self._markup = s

    def register_style(self, r: str, style: Style) -> None:
        """Register the style used for ``%<r>``; only letters are accepted.

        Registering ``N`` also sets the default style of the text.
        """
        if r == "N":
            self.set_style(style)
        if r.isalpha():
            self._markup_styles[r] = style

    def lookup_style(self, r: str) -> Style:
        """Return the style registered for r, or the default style."""
        return self._markup_styles.get(r, STYLE_DEFAULT)