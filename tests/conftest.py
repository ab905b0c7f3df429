import io

import pytest
from rich.console import Console

from outfmt import AssociativeList, FormatterManager, FormatterOptions, RowsOfFields, default_registry


def make_console(width: int = 120) -> Console:
    """Console writing plain text into a buffer"""
    return Console(
        file=io.StringIO(),
        width=width,
        color_system=None,
        force_terminal=False,
        legacy_windows=False,
    )


def normalize(text: str) -> str:
    """Strip trailing whitespace from every line and from the end"""
    return "\n".join(line.rstrip() for line in text.splitlines()).rstrip()


@pytest.fixture
def manager():
    return FormatterManager(default_registry())


@pytest.fixture
def console():
    return make_console()


@pytest.fixture
def formatted(manager):
    """Render data and return the normalized output"""
    def _formatted(format_id, data, configuration=None, options=None):
        output = make_console()
        manager.write(output, format_id, data, FormatterOptions(configuration or {}, options or {}))
        return normalize(output.file.getvalue())
    return _formatted


@pytest.fixture
def table_rows():
    return RowsOfFields([
        {"one": "a", "two": "b", "three": "c"},
        {"one": "x", "two": "y", "three": "z"},
    ])


@pytest.fixture
def assoc_list():
    return AssociativeList({"one": "apple", "two": "banana", "three": "carrot"})


@pytest.fixture
def japanese_labels():
    return {"field-labels": {"one": "Ichi", "two": "Ni", "three": "San"}}


@pytest.fixture
def narrow_console():
    """Console as wide as a piped terminal"""
    return make_console(width=80)
