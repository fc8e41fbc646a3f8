"""Menu template (.toon) loader.

Template layout:

    Main Menu:
      "Editor"[1]: nano notes.txt
      System:
        "Processes"[1]: htop
      "Quit"[1]: exit

The first top-level key is the menu title. Indented keys open submenus and
every line indented deeper belongs to them. Entries read
``"Label"[count]: action``; the count is the TOON array length and is only
checked to be an integer.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from tmenu.core.model import MenuDefinition, MenuEntry
from tmenu.utils.constants import DEFAULT_TITLE
from tmenu.utils.debug import debug_parse
from tmenu.utils.exceptions import ConfigNotFoundError, ConfigParseError

ENTRY_RE = re.compile(
    r'^(?P<label>"[^"]*"|[^\[\]"]+?)\s*\[(?P<count>[^\]]*)\]\s*:(?P<action>.*)$'
)
KEY_RE = re.compile(r'^(?P<name>"[^"]*"|[^"]+?)\s*:$')


@dataclass
class _Node:
    """Menu level under construction."""

    title: str
    indent: int
    line: int
    children: list[Union[MenuEntry, "_Node"]] = field(default_factory=list)

    def freeze(self) -> MenuDefinition:
        if not self.children:
            raise ConfigParseError(f"menu '{self.title}' has no entries", self.line)
        entries = []
        for child in self.children:
            if isinstance(child, _Node):
                entries.append(MenuEntry(child.title, submenu=child.freeze()))
            else:
                entries.append(child)
        return MenuDefinition(self.title, tuple(entries))


def _unquote(text: str) -> str:
    text = text.strip()
    if len(text) >= 2 and text[0] == text[-1] == '"':
        return text[1:-1]
    return text


def _indent_of(raw: str, lineno: int) -> int:
    stripped = raw.lstrip(" \t")
    leading = raw[: len(raw) - len(stripped)]
    if "\t" in leading:
        raise ConfigParseError("tabs are not allowed in indentation", lineno)
    return len(leading)


def parse_menu(text: str) -> MenuDefinition:
    """Parse template text into a MenuDefinition.

    Raises:
        ConfigParseError: If the template is malformed
    """
    root = _Node(DEFAULT_TITLE, indent=-1, line=1)
    stack = [root]
    titled = False

    for lineno, raw in enumerate(text.splitlines(), start=1):
        stripped = raw.strip()
        if not stripped or stripped.startswith("#"):
            continue

        indent = _indent_of(raw, lineno)

        # Close every level this line is not nested in
        while len(stack) > 1 and stack[-1].indent >= indent:
            stack.pop()
        parent = stack[-1]

        entry_match = ENTRY_RE.match(stripped)
        if entry_match:
            if indent == 0 and titled:
                raise ConfigParseError("entry outside of the menu", lineno)
            label = _unquote(entry_match.group("label"))
            count = entry_match.group("count").strip()
            action = _unquote(entry_match.group("action"))
            if not label:
                raise ConfigParseError("entry has an empty label", lineno)
            if not count.isdigit():
                raise ConfigParseError(
                    f"entry '{label}' has a non-numeric count [{count}]", lineno
                )
            if not action:
                raise ConfigParseError(f"entry '{label}' has no action", lineno)
            parent.children.append(MenuEntry(label, action))
            continue

        key_match = KEY_RE.match(stripped)
        if not key_match:
            raise ConfigParseError(f"cannot parse line: {stripped!r}", lineno)
        name = _unquote(key_match.group("name"))
        if not name:
            raise ConfigParseError("key has an empty name", lineno)

        if indent == 0:
            if titled or root.children:
                raise ConfigParseError(
                    f"unexpected top-level key '{name}' (only one menu per file)",
                    lineno,
                )
            root.title = name
            root.indent = 0
            root.line = lineno
            titled = True
            continue

        node = _Node(name, indent=indent, line=lineno)
        parent.children.append(node)
        stack.append(node)

    if not root.children:
        raise ConfigParseError("menu has no entries", root.line if titled else None)

    definition = root.freeze()
    debug_parse(
        "parsed menu",
        title=definition.title,
        entries=len(definition),
        total=definition.count_entries(),
    )
    return definition


def load_menu(path: Union[str, Path]) -> MenuDefinition:
    """Load a MenuDefinition from a template file.

    Raises:
        ConfigNotFoundError: If the file is missing or is not a regular file
        ConfigParseError: If the template is malformed or not UTF-8
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigNotFoundError(str(path))
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigNotFoundError(str(path)) from None
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"not valid UTF-8 ({e.reason})") from e
    debug_parse("loading menu", path=path)
    return parse_menu(text)
