import importlib

import pytest

import okrapy

PACKAGES = (
    "okrapy",
    "okrapy.ast",
    "okrapy.cli",
    "okrapy.diagnostics",
    "okrapy.format",
    "okrapy.lexer",
    "okrapy.parser",
    "okrapy.pipeline",
    "okrapy.printer",
    "okrapy.resolver",
    "okrapy.stringifier",
    "okrapy.text",
)


@pytest.mark.parametrize("name", PACKAGES)
def test_package_exports_resolve(name: str) -> None:
    module = importlib.import_module(name)

    missing = [export for export in getattr(module, "__all__", ()) if not hasattr(module, export)]
    assert missing == []


def test_top_level_api_round_trips() -> None:
    text = okrapy.stringify({"a": [1, True, "x"]})

    assert okrapy.parse(text) == {"a": [1.0, True, "x"]}
