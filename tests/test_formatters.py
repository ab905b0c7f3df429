"""
Tests for rendering data in every built-in format.
"""
import pytest

from outfmt import FormatterError, FormatterOptions, IncompatibleDataError, InvalidOptionError, RowsOfFields

NESTED = {
    "one": {"i": ["a", "b", "c"]},
    "two": {"ii": ["q", "r", "s"]},
    "three": {"iii": ["t", "u", "v"]},
}

SIMPLE = {"one": "a", "two": "b", "three": "c"}


# =============================================================================
# YAML / JSON
# =============================================================================


def test_simple_yaml(formatted):
    assert formatted("yaml", SIMPLE) == "one: a\ntwo: b\nthree: c"


def test_nested_yaml(formatted):
    expected = """\
one:
  i:
    - a
    - b
    - c
two:
  ii:
    - q
    - r
    - s
three:
  iii:
    - t
    - u
    - v"""
    assert formatted("yaml", NESTED) == expected


def test_yaml_of_scalar(formatted):
    assert formatted("yaml", "Hello") == "Hello"


def test_simple_json(formatted):
    expected = """\
{
    "one": "a",
    "two": "b",
    "three": "c"
}"""
    assert formatted("json", SIMPLE) == expected


def test_nested_json(formatted):
    expected = """\
{
    "one": {
        "i": [
            "a",
            "b",
            "c"
        ]
    },
    "two": {
        "ii": [
            "q",
            "r",
            "s"
        ]
    },
    "three": {
        "iii": [
            "t",
            "u",
            "v"
        ]
    }
}"""
    assert formatted("json", NESTED) == expected


def test_yaml_of_restructured_rows(formatted, table_rows, japanese_labels):
    expected = """\
- three: c
  one: a
- three: z
  one: x"""
    assert formatted("yaml", table_rows, japanese_labels, {"fields": ["San", "Ichi"]}) == expected


# =============================================================================
# Debug dumps
# =============================================================================


def test_simple_print_r(formatted):
    expected = """\
Array
(
    [one] => a
    [two] => b
    [three] => c
)"""
    assert formatted("print-r", SIMPLE) == expected


def test_nested_print_r(formatted):
    expected = """\
Array
(
    [one] => Array
        (
            [i] => Array
                (
                    [0] => a
                    [1] => b
                    [2] => c
                )

        )

    [two] => Array
        (
            [ii] => Array
                (
                    [0] => q
                    [1] => r
                    [2] => s
                )

        )

    [three] => Array
        (
            [iii] => Array
                (
                    [0] => t
                    [1] => u
                    [2] => v
                )

        )

)"""
    assert formatted("print-r", NESTED) == expected


def test_simple_var_export(formatted):
    expected = """\
array (
  'one' => 'a',
  'two' => 'b',
  'three' => 'c',
)"""
    assert formatted("var_export", SIMPLE) == expected


def test_nested_var_export(formatted):
    expected = """\
array (
  'one' =>
  array (
    'i' =>
    array (
      0 => 'a',
      1 => 'b',
      2 => 'c',
    ),
  ),
  'two' =>
  array (
    'ii' =>
    array (
      0 => 'q',
      1 => 'r',
      2 => 's',
    ),
  ),
  'three' =>
  array (
    'iii' =>
    array (
      0 => 't',
      1 => 'u',
      2 => 'v',
    ),
  ),
)"""
    assert formatted("var_export", NESTED) == expected


def test_var_export_scalars(formatted):
    data = {"quote": "John's", "count": 3, "on": True, "off": False, "none": None}
    expected = """\
array (
  'quote' => 'John\\'s',
  'count' => 3,
  'on' => true,
  'off' => false,
  'none' => NULL,
)"""
    assert formatted("var_export", data) == expected


def test_php_serialize(formatted):
    data = {"one": "a", "n": 2, "flag": True, "list": ["x"], "none": None}
    expected = 'a:5:{s:3:"one";s:1:"a";s:1:"n";i:2;s:4:"flag";b:1;s:4:"list";a:1:{i:0;s:1:"x";}s:4:"none";N;}'
    assert formatted("php", data) == expected


def test_php_serialize_counts_bytes(formatted):
    assert formatted("php", "café") == 's:5:"café";'


# =============================================================================
# String
# =============================================================================


def test_no_formatter_selected(formatted):
    assert formatted("", "Hello") == "Hello"


def test_empty_format_matches_string(formatted, table_rows):
    for data in ("Hello", ["a", "b"], SIMPLE, table_rows):
        assert formatted("", data) == formatted("string", data)


def test_string_of_rows_is_tab_separated(formatted, table_rows):
    assert formatted("string", table_rows) == "a\tb\tc\nx\ty\tz"


def test_string_with_single_field(formatted, table_rows):
    assert formatted("string", table_rows, {}, {"field": "two"}) == "b\ny"


def test_string_uses_default_string_field(formatted, assoc_list):
    assert formatted("string", assoc_list, {"default-string-field": "two"}) == "banana"


def test_requested_fields_beat_default_string_field(formatted, table_rows):
    configuration = {"default-string-field": "two"}
    assert formatted("string", table_rows, configuration, {"fields": ["three", "one"]}) == "c\ta\nz\tx"


class FieldsInput:
    """Input source carrying a --fields value"""

    def has_option(self, key):
        return key == "fields"

    def get_option(self, key):
        return "one"


def test_single_field_beats_bound_fields(manager, console, table_rows, japanese_labels):
    options = FormatterOptions(japanese_labels, {"field": "San"}).set_input(FieldsInput())
    manager.write(console, "string", table_rows, options)
    assert console.file.getvalue() == "c\nz\n"


def test_string_with_single_field_by_label(formatted, table_rows, japanese_labels):
    assert formatted("string", table_rows, japanese_labels, {"field": "San"}) == "c\nz"


# =============================================================================
# List
# =============================================================================


def test_list(formatted):
    assert formatted("list", SIMPLE) == "a\nb\nc"


def test_list_of_associative_list_follows_fields(formatted, assoc_list, japanese_labels):
    assert formatted("list", assoc_list) == "apple\nbanana\ncarrot"
    assert formatted("list", assoc_list, japanese_labels, {"fields": ["San", "Ichi"]}) == "carrot\napple"


def test_list_of_keyed_rows_lists_row_ids(formatted):
    rows = RowsOfFields({"web": {"status": "up"}, "db": {"status": "down"}})
    assert formatted("list", rows) == "web\ndb"


def test_list_of_rows_lists_first_selected_field(formatted, table_rows):
    assert formatted("list", table_rows) == "a\nx"
    assert formatted("list", table_rows, {}, {"fields": "three"}) == "c\nz"


def test_list_rejects_arbitrary_objects(manager, console):
    with pytest.raises(IncompatibleDataError):
        manager.write(console, "list", object(), FormatterOptions())


# =============================================================================
# CSV
# =============================================================================


def test_simple_csv(formatted):
    assert formatted("csv", ["a", "b", "c"]) == "a,b,c"


def test_lines_of_csv(formatted):
    assert formatted("csv", [["a", "b", "c"], ["x", "y", "z"]]) == "a,b,c\nx,y,z"


def test_csv_does_not_quote_spaces_or_single_quotes(formatted):
    assert formatted("csv", ["Red apple", "Yellow lemon"]) == "Red apple,Yellow lemon"
    assert formatted("csv", ["John's book", "Mary's laptop"]) == "John's book,Mary's laptop"


def test_csv_with_embedded_double_quote(formatted):
    assert formatted("csv", ['The "best" solution']) == '"The ""best"" solution"'


def test_csv_both_kinds_of_quotes(formatted):
    data = ["John's \"new\" book", "Mary's \"modified\" laptop"]
    assert formatted("csv", data) == '"John\'s ""new"" book","Mary\'s ""modified"" laptop"'


def test_csv_quotes_delimiter_and_newline(formatted, manager, console):
    assert formatted("csv", ["a,b", "c"]) == '"a,b",c'
    manager.write(console, "csv", ["line\nbreak", "x"])
    assert console.file.getvalue() == '"line\nbreak",x\n'


def test_csv_of_rows_has_label_line(formatted, table_rows, japanese_labels):
    assert formatted("csv", table_rows) == "One,Two,Three\na,b,c\nx,y,z"
    assert formatted("csv", table_rows, japanese_labels, {"fields": ["San", "Ichi"]}) == "San,Ichi\nc,a\nz,x"


def test_csv_without_labels(formatted, table_rows):
    assert formatted("csv", table_rows, {}, {"include-field-labels": False}) == "a,b,c\nx,y,z"


def test_csv_of_associative_list(formatted, assoc_list):
    assert formatted("csv", assoc_list) == "One,Two,Three\napple,banana,carrot"


def test_csv_with_delimiter(formatted):
    assert formatted("csv", ["a;b", "c"], {"delimiter": ";"}) == '"a;b";c'


@pytest.mark.parametrize("delimiter", ["", "||", "\"", "\n", 5])
def test_csv_rejects_unusable_delimiter(manager, console, delimiter):
    options = FormatterOptions({"delimiter": delimiter})
    with pytest.raises(InvalidOptionError, match="delimiter option for csv") as excinfo:
        manager.write(console, "csv", ["a", "b"], options)
    assert isinstance(excinfo.value, FormatterError)
    assert excinfo.value.value == delimiter
    assert console.file.getvalue() == ""


def test_csv_rejects_scalars(manager, console):
    with pytest.raises(IncompatibleDataError):
        manager.write(console, "csv", "Hello", FormatterOptions())
    assert console.file.getvalue() == ""


# =============================================================================
# Table
# =============================================================================


def test_simple_table(formatted, table_rows):
    expected = """\
+-----+-----+-------+
| One | Two | Three |
+-----+-----+-------+
| a   | b   | c     |
| x   | y   | z     |
+-----+-----+-------+"""
    expected_json = """\
[
    {
        "one": "a",
        "two": "b",
        "three": "c"
    },
    {
        "one": "x",
        "two": "y",
        "three": "z"
    }
]"""
    assert formatted("table", table_rows) == expected
    assert formatted("json", table_rows) == expected_json


def test_simple_table_with_field_labels(formatted, table_rows, japanese_labels):
    expected = """\
+------+----+-----+
| Ichi | Ni | San |
+------+----+-----+
| a    | b  | c   |
| x    | y  | z   |
+------+----+-----+"""
    expected_reordered = """\
+-----+------+
| San | Ichi |
+-----+------+
| c   | a    |
| z   | x    |
+-----+------+"""
    expected_json = """\
[
    {
        "three": "c",
        "one": "a"
    },
    {
        "three": "z",
        "one": "x"
    }
]"""
    assert formatted("table", table_rows, japanese_labels) == expected
    assert formatted("table", table_rows, japanese_labels, {"fields": ["three", "one"]}) == expected_reordered
    assert formatted("table", table_rows, japanese_labels, {"fields": ["San", "Ichi"]}) == expected_reordered
    assert formatted("json", table_rows, japanese_labels, {"fields": ["San", "Ichi"]}) == expected_json


def test_simple_list(formatted, assoc_list):
    expected = """\
+-------+--------+
| One   | apple  |
| Two   | banana |
| Three | carrot |
+-------+--------+"""
    assert formatted("table", assoc_list) == expected


def test_simple_list_with_field_labels(formatted, assoc_list, japanese_labels):
    expected = """\
+------+--------+
| Ichi | apple  |
| Ni   | banana |
| San  | carrot |
+------+--------+"""
    expected_reordered = """\
+------+--------+
| San  | carrot |
| Ichi | apple  |
+------+--------+"""
    expected_json = """\
[
    {
        "three": "carrot",
        "one": "apple"
    }
]"""
    assert formatted("table", assoc_list, japanese_labels) == expected
    assert formatted("table", assoc_list, japanese_labels, {"fields": ["three", "one"]}) == expected_reordered
    assert formatted("table", assoc_list, japanese_labels, {"fields": ["San", "Ichi"]}) == expected_reordered
    assert formatted("json", assoc_list, japanese_labels, {"fields": ["San", "Ichi"]}) == expected_json


def test_table_without_field_labels(formatted, table_rows, assoc_list):
    expected_rows = """\
+---+---+---+
| a | b | c |
| x | y | z |
+---+---+---+"""
    expected_list = """\
+--------+
| apple  |
| banana |
| carrot |
+--------+"""
    assert formatted("table", table_rows, {"include-field-labels": False}) == expected_rows
    assert formatted("table", assoc_list, {}, {"include-field-labels": False}) == expected_list


def test_table_with_vertical_orientation(formatted, table_rows):
    expected = """\
+-------+---+---+
| One   | a | x |
| Two   | b | y |
| Three | c | z |
+-------+---+---+"""
    assert formatted("table", table_rows, {"list-orientation": "vertical"}) == expected


def test_table_missing_cells_are_empty(formatted):
    rows = RowsOfFields([{"one": "a", "two": "b"}, {"one": "x"}])
    expected = """\
+-----+-----+
| One | Two |
+-----+-----+
| a   | b   |
| x   |     |
+-----+-----+"""
    assert formatted("table", rows) == expected


def test_table_cells_are_not_markup(formatted):
    rows = RowsOfFields([{"tag": "[bold]x[/bold]"}])
    assert "[bold]x[/bold]" in formatted("table", rows)


def test_table_flattens_nested_cells(formatted):
    rows = RowsOfFields([{"name": "web", "ports": [80, 443], "flags": None}])
    expected = """\
+------+---------+-------+
| Name | Ports   | Flags |
+------+---------+-------+
| web  | 80, 443 |       |
+------+---------+-------+"""
    assert formatted("table", rows) == expected


def test_table_applies_cell_renderer(formatted):
    def render(key, value, options, record):
        return value.upper() if key == "status" else value

    rows = RowsOfFields([{"name": "web", "status": "up"}], cell_renderer=render)
    assert "| web  | UP     |" in formatted("table", rows)


def test_wide_table_keeps_natural_width(manager, narrow_console):
    rows = RowsOfFields([{"id": "1", "description": "x" * 100}])
    manager.write(narrow_console, "table", rows, FormatterOptions())
    border = "+----+" + "-" * 102 + "+"
    assert narrow_console.file.getvalue().splitlines() == [
        border,
        "| Id | " + "Description".ljust(100) + " |",
        border,
        "| 1  | " + "x" * 100 + " |",
        border,
    ]


def test_wide_sections_keep_natural_width(manager, narrow_console):
    rows = RowsOfFields({"web": {"motd": "y" * 90}})
    manager.write(narrow_console, "sections", rows, FormatterOptions())
    assert any("y" * 90 in line for line in narrow_console.file.getvalue().splitlines())


def test_table_with_other_style(formatted, table_rows):
    output = formatted("table", table_rows, {"table-style": "box"})
    assert "+" not in output
    assert "One" in output


def test_table_with_unknown_style_uses_default(formatted, table_rows, caplog):
    output = formatted("table", table_rows, {"table-style": "fancy"})
    assert output.splitlines()[0] == "+-----+-----+-------+"
    assert "Unknown table style" in caplog.text


def test_incompatible_data_for_table_formatter(manager, console, table_rows):
    with pytest.raises(IncompatibleDataError) as excinfo:
        manager.write(console, "table", table_rows.to_plain(), FormatterOptions())
    assert str(excinfo.value) == (
        "Data provided to table must be either an instance of RowsOfFields "
        "or an instance of AssociativeList. Instead, an array was provided."
    )
    assert excinfo.value.formatter_name == "table"
    assert excinfo.value.accepted_shapes == ("RowsOfFields", "AssociativeList")
    assert console.file.getvalue() == ""


def test_incompatible_list_data_for_table_formatter(manager, console, assoc_list):
    with pytest.raises(IncompatibleDataError, match="Instead, a mapping was provided"):
        manager.write(console, "table", assoc_list.to_plain(), FormatterOptions())
    assert console.file.getvalue() == ""


# =============================================================================
# Sections
# =============================================================================


def test_sections(formatted):
    rows = RowsOfFields({
        "web": {"host": "web1", "status": "up"},
        "db": {"host": "db1", "status": "down"},
    })
    lines = formatted("sections", rows, {"row-labels": "web:Web Server"}).splitlines()
    assert "Web Server" in lines
    assert "db" in lines
    assert any("Host" in line and "web1" in line for line in lines)
    assert any("Status" in line and "down" in line for line in lines)
    assert lines.index("Web Server") < lines.index("db")


def test_sections_rejects_associative_list(manager, console, assoc_list):
    with pytest.raises(IncompatibleDataError, match="an instance of RowsOfFields"):
        manager.write(console, "sections", assoc_list, FormatterOptions())
    assert console.file.getvalue() == ""
