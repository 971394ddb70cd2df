"""Tests for the console report and the demo script"""
import importlib.util
import json
import sys
from pathlib import Path

import pytest
from rich.console import Console

from src.class_comparator import ComparisonReport, compare_objects, render_report

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "compare_objects.py"


@pytest.fixture(scope="module")
def demo():
    spec = importlib.util.spec_from_file_location("compare_objects_demo", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_render_report():
    report = ComparisonReport(
        left_type="Bean1",
        right_type="Bean2",
        left_properties=["id", "name", "tags"],
        right_properties=["ID"],
        by_name=1,
        by_name_and_declared_type=1,
        by_name_and_value_type=0
    )
    console = render_report(report, Console(record=True, width=100))
    text = console.export_text()

    assert "Bean1" in text and "Bean2" in text
    assert "tags" in text
    assert "by name and property type" in text
    assert "by name and value type" in text


def test_demo_beans(demo):
    report = compare_objects(demo.Bean1(), demo.Bean2())

    assert report.left_properties == ["id", "name", "size", "tags"]
    assert report.right_properties == ["ID", "name", "size", "created_by", "checksum"]
    # id/ID, name, size
    assert report.by_name == 3
    # only id: name is Optional[str] vs str, size is int vs str
    assert report.by_name_and_declared_type == 1
    # only id: name is None on Bean2, checksum cannot be read
    assert report.by_name_and_value_type == 1


def test_demo_main_json(demo, monkeypatch, capsys, tmp_path, restore_logger):
    monkeypatch.setenv("CLASS_COMPARATOR_LOGGING_FILE", str(tmp_path / "app.log"))
    monkeypatch.setattr(sys, "argv", ["compare_objects.py", "--json"])

    demo.main()

    data = json.loads(capsys.readouterr().out)
    assert data["by_name"] == 3
    assert data["by_name_and_declared_type"] == 1
    assert data["by_name_and_value_type"] == 1
