"""Tests for recipient collection and serialization."""

from voter_outreach.lib.composer import capitalize_name, collect_recipients, parse_recipients, serialize_recipients


class TestCapitalizeName:
    """Tests for capitalize_name."""

    def test_lowercase(self) -> None:
        assert capitalize_name("bob") == "Bob"

    def test_uppercase(self) -> None:
        assert capitalize_name("MARY ANN") == "Mary ann"

    def test_empty_and_none(self) -> None:
        assert capitalize_name("") == ""
        assert capitalize_name(None) == ""


class TestCollectRecipients:
    """Tests for collect_recipients."""

    def test_both_phones_recorded(self) -> None:
        assert collect_recipients([("bob", "555-1111", "555-2222")]) == {"555-1111": "Bob", "555-2222": "Bob"}

    def test_blank_phones_skipped_and_trimmed(self) -> None:
        rows = [("ann", "  ", " 555-3333 "), ("cy", None, "")]
        assert collect_recipients(rows) == {"555-3333": "Ann"}

    def test_shared_number_last_row_wins(self) -> None:
        rows = [("ann", "555-1111", ""), ("bob", "555-1111", "")]
        assert collect_recipients(rows) == {"555-1111": "Bob"}

    def test_empty(self) -> None:
        assert collect_recipients([]) == {}


class TestSerializeRecipients:
    """Tests for serialize_recipients and parse_recipients."""

    def test_header_and_rows(self) -> None:
        text = serialize_recipients({"555-1111": "Bob", "555-2222": "Ann"})
        assert text == "phone,name\n555-1111,Bob\n555-2222,Ann\n"

    def test_empty_has_header_only(self) -> None:
        assert serialize_recipients({}) == "phone,name\n"

    def test_name_with_comma_is_quoted(self) -> None:
        text = serialize_recipients({"555-1111": "Bob, jr"})
        assert text == 'phone,name\n555-1111,"Bob, jr"\n'
        assert parse_recipients(text) == {"555-1111": "Bob, jr"}
