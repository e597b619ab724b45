"""
Static checks on the Streamlit scripts.

The scripts only run under `streamlit run`, so they are parsed rather
than imported.
"""
import ast
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SCRIPTS = [ROOT / "Home.py"] + sorted((ROOT / "pages").glob("*.py"))


def calls_to(tree, attr):
    return [node for node in ast.walk(tree)
            if isinstance(node, ast.Call)
            and isinstance(node.func, ast.Attribute)
            and node.func.attr == attr]


@pytest.mark.parametrize("path", SCRIPTS, ids=lambda p: p.name)
class TestScripts:

    def test_parses_with_coding_line(self, path):
        source = path.read_text(encoding="utf-8")
        assert source.splitlines()[0] == "# -*- coding: utf-8 -*-"
        ast.parse(source, filename=str(path))

    def test_plotly_charts_fill_the_column(self, path):
        tree = ast.parse(path.read_text(encoding="utf-8"))
        for call in calls_to(tree, "plotly_chart"):
            keywords = {kw.arg: kw.value for kw in call.keywords}
            assert "width" not in keywords
            assert isinstance(keywords.get("use_container_width"), ast.Constant)
            assert keywords["use_container_width"].value is True
