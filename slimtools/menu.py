"""Interactive menu model: item matching, input editing and selection."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Set

BUFSIZ = 8192
WORD_DELIMITERS = " "


def cistrstr(haystack: str, needle: str) -> Optional[int]:
    """Return the index of *needle* in *haystack* ignoring case, or None."""
    if not needle:
        return 0
    index = haystack.lower().find(needle.lower())
    return None if index < 0 else index


def _contains(haystack: str, needle: str, case_insensitive: bool) -> bool:
    if case_insensitive:
        return cistrstr(haystack, needle) is not None
    return needle in haystack


def _equal(a: str, b: str, case_insensitive: bool) -> bool:
    return a.lower() == b.lower() if case_insensitive else a == b


def _startswith(text: str, prefix: str, case_insensitive: bool) -> bool:
    if case_insensitive:
        return text.lower().startswith(prefix.lower())
    return text.startswith(prefix)


def _match_indices(
    items: Sequence[str], text: str, case_insensitive: bool
) -> List[int]:
    tokens = [token for token in text.split(" ") if token]
    exact: List[int] = []
    prefix: List[int] = []
    substring: List[int] = []
    for index, item in enumerate(items):
        if not all(_contains(item, token, case_insensitive) for token in tokens):
            continue
        # exact matches go first, then prefixes, then substrings
        if not tokens or _equal(text, item, case_insensitive):
            exact.append(index)
        elif _startswith(item, tokens[0], case_insensitive):
            prefix.append(index)
        else:
            substring.append(index)
    return exact + prefix + substring


def match_items(
    items: Sequence[str], text: str, case_insensitive: bool = False
) -> List[str]:
    """Return the items matching every space-separated token of *text*.

    Exact matches come first, then items starting with the first token,
    then the remaining matches, each group in input order.
    """
    return [items[index] for index in _match_indices(items, text, case_insensitive)]


def read_items(stream: Iterable[str]) -> List[str]:
    """Read one item per line, dropping the trailing newline."""
    return [line[:-1] if line.endswith("\n") else line for line in stream]


class Menu:
    """State of a horizontal menu: input text, cursor, matches and selection."""

    def __init__(
        self,
        items: Sequence[str],
        case_insensitive: bool = False,
        word_delimiters: str = WORD_DELIMITERS,
    ) -> None:
        self.items: List[str] = list(items)
        self.case_insensitive = case_insensitive
        self.word_delimiters = word_delimiters
        self.text = ""
        self.cursor = 0
        self._matches: List[int] = []
        self._sel: Optional[int] = None
        self._marked: Set[int] = set()
        self._match()

    # -- state -----------------------------------------------------------

    @property
    def matches(self) -> List[str]:
        """The currently matching items, in display order."""
        return [self.items[index] for index in self._matches]

    @property
    def selected_index(self) -> Optional[int]:
        """Position of the selection within the matches, or None."""
        return self._sel

    @property
    def selected(self) -> Optional[str]:
        """The selected item, or None when nothing matches."""
        if self._sel is None:
            return None
        return self.items[self._matches[self._sel]]

    @property
    def marked(self) -> List[str]:
        """Items already output, in input order."""
        return [self.items[index] for index in sorted(self._marked)]

    def _match(self) -> None:
        self._matches = _match_indices(self.items, self.text, self.case_insensitive)
        self._sel = 0 if self._matches else None

    def _is_delim(self, char: str) -> bool:
        return char in self.word_delimiters

    def _set_text(self, text: str, cursor: int) -> None:
        self.text = text
        self.cursor = cursor
        self._match()

    # -- editing ---------------------------------------------------------

    def insert(self, text: str) -> None:
        """Insert *text* at the cursor unless the input would grow too long."""
        if len(self.text.encode()) + len(text.encode()) > BUFSIZ - 1:
            return
        before, after = self.text[: self.cursor], self.text[self.cursor:]
        self._set_text(before + text + after, self.cursor + len(text))

    def backspace(self) -> None:
        """Delete the character before the cursor."""
        if self.cursor == 0:
            return
        self._set_text(
            self.text[: self.cursor - 1] + self.text[self.cursor:], self.cursor - 1
        )

    def delete(self) -> None:
        """Delete the character under the cursor."""
        if self.cursor >= len(self.text):
            return
        self._set_text(
            self.text[: self.cursor] + self.text[self.cursor + 1:], self.cursor
        )

    def delete_to_end(self) -> None:
        """Delete everything from the cursor to the end of the input."""
        self._set_text(self.text[: self.cursor], self.cursor)

    def delete_to_start(self) -> None:
        """Delete everything before the cursor."""
        self._set_text(self.text[self.cursor:], 0)

    def delete_word(self) -> None:
        """Delete the word before the cursor and any delimiters after it."""
        start = self.cursor
        while start > 0 and self._is_delim(self.text[start - 1]):
            start -= 1
        while start > 0 and not self._is_delim(self.text[start - 1]):
            start -= 1
        if start == self.cursor:
            return
        self._set_text(self.text[:start] + self.text[self.cursor:], start)

    # -- cursor movement -------------------------------------------------

    def move_word_edge(self, direction: int) -> None:
        """Move to the start of the previous word (<0) or end of the next (>0)."""
        text = self.text
        cursor = self.cursor
        if direction < 0:
            while cursor > 0 and self._is_delim(text[cursor - 1]):
                cursor -= 1
            while cursor > 0 and not self._is_delim(text[cursor - 1]):
                cursor -= 1
        else:
            while cursor < len(text) and self._is_delim(text[cursor]):
                cursor += 1
            while cursor < len(text) and not self._is_delim(text[cursor]):
                cursor += 1
        self.cursor = cursor

    def move_left(self) -> None:
        """Move the cursor left, or select the previous match."""
        if self.cursor > 0 and not self._sel:
            self.cursor -= 1
            return
        self.select_previous()

    def move_right(self) -> None:
        """Move the cursor right, or select the next match at end of input."""
        if self.cursor < len(self.text):
            self.cursor += 1
            return
        self.select_next()

    # -- selection -------------------------------------------------------

    def select_next(self) -> None:
        """Select the following match, if any."""
        if self._sel is not None and self._sel + 1 < len(self._matches):
            self._sel += 1

    def select_previous(self) -> None:
        """Select the preceding match, if any."""
        if self._sel:
            self._sel -= 1

    def select_first(self) -> None:
        """Select the first match; if already there, move the cursor home."""
        if not self._sel:
            self.cursor = 0
            return
        self._sel = 0

    def select_last(self) -> None:
        """Move the cursor to the end; if already there, select the last match."""
        if self.cursor < len(self.text):
            self.cursor = len(self.text)
            return
        self._sel = len(self._matches) - 1 if self._matches else None

    def complete(self) -> None:
        """Replace the input with the selected item."""
        selected = self.selected
        if selected is None:
            return
        data = selected.encode()[: BUFSIZ - 1].decode("utf-8", errors="ignore")
        self._set_text(data, len(data))

    def accept(self, use_input: bool = False) -> str:
        """Return the selection (or the input text) and mark the selection as output."""
        if self._sel is not None:
            self._marked.add(self._matches[self._sel])
        if self.selected is not None and not use_input:
            return self.selected
        return self.text