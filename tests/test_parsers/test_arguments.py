import pytest

from ncline.parser.arguments import (
    SPACE_REPLACEMENT,
    generate_arguments,
    parse_named_arguments,
    transform_quoted_values,
)


def backup(alias, original_path, new_path):
    pass


# --- transform_quoted_values ---
def test_quoted_spaces_are_replaced():
    result = transform_quoted_values('"Simple quoted string"')
    assert result == f"Simple{SPACE_REPLACEMENT}quoted{SPACE_REPLACEMENT}string"


def test_spaces_outside_quotes_are_kept():
    result = transform_quoted_values('"quote 1" bareString "quote 2"')
    assert result == (
        f"quote{SPACE_REPLACEMENT}1 bareString quote{SPACE_REPLACEMENT}2"
    )


def test_identical_quoted_segments_are_all_transformed():
    result = transform_quoted_values('"a b" "a b"')
    assert result == f"a{SPACE_REPLACEMENT}b a{SPACE_REPLACEMENT}b"


def test_unterminated_quote_is_dropped_as_plain_text():
    assert transform_quoted_values('say "hello there') == "say hello there"


# --- parse_named_arguments ---
def test_named_arguments_follow_declared_order():
    result = parse_named_arguments(
        ["arg3:last", "arg1:first", "arg2:second"], ["arg1", "arg2", "arg3"]
    )
    assert result == ["first", "second", "last"]


def test_named_arguments_keep_colons_in_values():
    result = parse_named_arguments(
        ["arg3:some:colon:delimited:value", "arg1:C:\\filePath", "arg2:second"],
        ["arg1", "arg2", "arg3"],
    )
    assert result == ["C:\\filePath", "second", "some:colon:delimited:value"]


def test_named_arguments_pad_missing_with_none():
    assert parse_named_arguments(["a:1"], ["a", "b", "c"]) == ["1", None, None]


def test_named_arguments_ignore_unknown_names():
    assert parse_named_arguments(["z:9", "b:2"], ["a", "b"]) == [None, "2"]


def test_named_arguments_introspect_callable():
    result = parse_named_arguments(["new_path:D:\\x", "alias:bk"], backup)
    assert result == ["bk", None, "D:\\x"]


def test_named_arguments_with_no_parameters():
    assert parse_named_arguments(["a:1"], []) == []


# --- generate_arguments ---
@pytest.mark.parametrize(
    "argument_string",
    ["one", "one two", "alpha beta gamma delta"],
)
def test_plain_positional_tokens_pass_through(argument_string):
    tokens = argument_string.split(" ")
    assert generate_arguments(argument_string, tokens) == tokens


def test_quoted_values_keep_spaces():
    assert generate_arguments('"a b" c "d e f"') == ["a b", "c", "d e f"]


def test_quoted_paths_do_not_change_argument_count():
    result = generate_arguments(
        'backup "C:\\My Documents\\backups" "D:\\My Documents\\backups"', backup
    )
    assert len(result) == 3
    assert result[1] == "C:\\My Documents\\backups"
    assert all('"' not in value for value in result)


def test_named_form_with_brackets_and_braces():
    assert generate_arguments("[b:2 a:1]", ["a", "b"]) == ["1", "2"]
    assert generate_arguments("[a:1 b:2]", ["a", "b"]) == ["1", "2"]
    assert generate_arguments("{b:2 a:1}", ["a", "b"]) == ["1", "2"]


def test_named_form_with_quoted_values():
    result = generate_arguments(
        '[alias:backup original_path:"C:\\My Documents\\backups" '
        'new_path:"D:\\My Documents\\backups"]',
        backup,
    )
    assert result == ["backup", "C:\\My Documents\\backups", "D:\\My Documents\\backups"]


def test_named_form_preserves_drive_letter():
    assert generate_arguments("[path:C:\\Users\\x]", ["path"]) == ["C:\\Users\\x"]


def test_named_form_omission_yields_none():
    assert generate_arguments("[a:1]", ["a", "b", "c"]) == ["1", None, None]


def test_empty_named_form_is_all_none():
    assert generate_arguments("[]", ["a", "b"]) == [None, None]


def test_null_literal_becomes_none():
    assert generate_arguments("backup null", backup) == ["backup", None]
    assert generate_arguments('backup "null"', backup) == ["backup", None]
    assert generate_arguments(
        "[alias:codeFiles original_path:null new_path:null]", backup
    ) == ["codeFiles", None, None]


def test_blank_argument_string_yields_no_arguments():
    assert generate_arguments("") == []
    assert generate_arguments("   ") == []


def test_surrounding_whitespace_is_trimmed():
    assert generate_arguments("  one two  ") == ["one", "two"]


def test_consecutive_spaces_produce_empty_tokens():
    assert generate_arguments("one  two") == ["one", "", "two"]


def test_unbalanced_envelope_is_positional():
    assert generate_arguments("[a:1", ["a"]) == ["[a:1"]
