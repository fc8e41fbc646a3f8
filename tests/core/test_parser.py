"""Tests for the .toon template loader."""

import pytest

from tmenu.core.parser import load_menu, parse_menu
from tmenu.utils.exceptions import ConfigNotFoundError, ConfigParseError


class TestParseMenu:
    """Tests for parse_menu."""

    def test_title_and_entries_in_file_order(self):
        """Top-level key becomes the title, entries keep file order."""
        menu = parse_menu(
            'Tools:\n  "One"[1]: echo 1\n  "Two"[1]: echo 2\n  "Three"[1]: echo 3\n'
        )

        assert menu.title == "Tools"
        assert [e.label for e in menu.entries] == ["One", "Two", "Three"]
        assert [e.action for e in menu.entries] == ["echo 1", "echo 2", "echo 3"]

    def test_default_title_without_key(self):
        """Templates without a title line get the default title."""
        menu = parse_menu('"Only"[1]: ls\n')

        assert menu.title == "Main Menu"
        assert len(menu) == 1

    def test_quoted_title_and_unquoted_label(self):
        """Quotes are stripped from titles; bare labels are accepted."""
        menu = parse_menu('"My Menu":\n  List files[1]: ls -la\n')

        assert menu.title == "My Menu"
        assert menu.entries[0].label == "List files"

    def test_action_quotes_stripped(self):
        """Surrounding quotes are removed from actions."""
        menu = parse_menu('M:\n  "Say"[1]: "echo hi"\n')

        assert menu.entries[0].action == "echo hi"

    def test_action_keeps_colons_and_brackets(self):
        """Only the first ]: splits label from action."""
        menu = parse_menu('M:\n  "Grep"[1]: grep -E "[a-z]+: " log.txt\n')

        assert menu.entries[0].action == 'grep -E "[a-z]+: " log.txt'

    def test_comments_and_blank_lines_ignored(self):
        """Comments and blank lines do not produce entries."""
        menu = parse_menu('# header\n\nM:\n\n  # note\n  "A"[1]: a\n\n')

        assert [e.label for e in menu.entries] == ["A"]

    def test_submenu_in_file_order(self):
        """Submenus sit among their siblings in file order."""
        menu = parse_menu(
            "M:\n"
            '  "First"[1]: one\n'
            "  Sub:\n"
            '    "Inner"[1]: inner\n'
            '  "Last"[1]: last\n'
        )

        labels = [e.label for e in menu.entries]
        assert labels == ["First", "Sub", "Last"]
        sub = menu.entries[1]
        assert sub.is_submenu
        assert sub.submenu.title == "Sub"
        assert [e.action for e in sub.submenu.entries] == ["inner"]

    def test_multiple_and_nested_submenus(self):
        """Every submenu is kept and submenus may nest."""
        menu = parse_menu(
            "M:\n"
            "  A:\n"
            '    "a1"[1]: a1\n'
            "    Deep:\n"
            '      "d1"[1]: d1\n'
            "  B:\n"
            '    "b1"[1]: b1\n'
        )

        assert [e.label for e in menu.entries] == ["A", "B"]
        a = menu.entries[0].submenu
        assert [e.label for e in a.entries] == ["a1", "Deep"]
        assert a.entries[1].submenu.entries[0].action == "d1"
        assert menu.count_entries() == 6

    def test_exit_entry_detected(self):
        """The reserved exit action is recognised."""
        menu = parse_menu('M:\n  "Quit"[1]: exit\n')

        assert menu.entries[0].is_exit

    def test_sample_template(self, menu_file):
        """The sample template has four top-level entries."""
        menu = load_menu(menu_file)

        assert menu.title == "Main Menu"
        assert [e.label for e in menu.entries] == [
            "Editor",
            "Git status",
            "System",
            "Quit",
        ]


class TestParseErrors:
    """Malformed templates raise ConfigParseError."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "# only a comment\n",
            "M:\n",
        ],
    )
    def test_empty_menu(self, text):
        """A menu without entries is rejected."""
        with pytest.raises(ConfigParseError, match="no entries"):
            parse_menu(text)

    def test_empty_submenu(self):
        """A submenu without entries is rejected at its line."""
        with pytest.raises(ConfigParseError) as exc:
            parse_menu('M:\n  Empty:\n  "A"[1]: a\n')

        assert exc.value.line == 2

    def test_garbage_line(self):
        """Lines that are neither keys nor entries are rejected."""
        with pytest.raises(ConfigParseError) as exc:
            parse_menu('M:\n  "A"[1]: a\n  just some text\n')

        assert exc.value.line == 3

    def test_missing_action(self):
        """Entries need an action."""
        with pytest.raises(ConfigParseError, match="no action"):
            parse_menu('M:\n  "A"[1]:\n')

    def test_non_numeric_count(self):
        """The bracket must hold a count."""
        with pytest.raises(ConfigParseError, match="count"):
            parse_menu('M:\n  "A"[x]: a\n')

    def test_second_top_level_key(self):
        """Only one menu per file."""
        with pytest.raises(ConfigParseError, match="top-level"):
            parse_menu('M:\n  "A"[1]: a\nOther:\n  "B"[1]: b\n')

    def test_tab_indentation(self):
        """Tabs in indentation are rejected."""
        with pytest.raises(ConfigParseError, match="tabs"):
            parse_menu('M:\n\t"A"[1]: a\n')


class TestLoadMenu:
    """Tests for load_menu."""

    def test_missing_file(self, temp_dir):
        """Missing files raise ConfigNotFoundError."""
        with pytest.raises(ConfigNotFoundError):
            load_menu(temp_dir / "nope.toon")

    def test_directory_is_not_a_menu(self, temp_dir):
        """Directories raise ConfigNotFoundError."""
        with pytest.raises(ConfigNotFoundError):
            load_menu(temp_dir)

    def test_malformed_file(self, temp_dir):
        """Malformed files raise ConfigParseError."""
        path = temp_dir / "bad.toon"
        path.write_text("M:\n  what is this\n")

        with pytest.raises(ConfigParseError):
            load_menu(path)

    def test_non_utf8_file(self, temp_dir):
        """Undecodable files raise ConfigParseError."""
        path = temp_dir / "latin1.toon"
        path.write_bytes('M:\n  "Caf\xe9"[1]: ls\n'.encode("latin-1"))

        with pytest.raises(ConfigParseError, match="UTF-8"):
            load_menu(path)

    def test_accepts_str_path(self, menu_file):
        """String paths work as well as Path objects."""
        assert len(load_menu(str(menu_file))) == 4
