import csv

import pytest

from src.main.collect.metrics.metrics_collector import MetricsCollector, main
from src.main.engine.errors import SourceEncodingError, TreeTooLargeError

SOURCE = "let x = prompt(); if (x > 1) { print(x); }"


@pytest.fixture
def collector():
    return MetricsCollector()


def read_rows(path):
    with path.open(encoding="utf-8", newline="") as f:
        return list(csv.reader(f))


def test_read_js_reads_file(tmp_path):
    f = tmp_path / "foo.js"
    f.write_text("hello")
    assert MetricsCollector.read_js(f) == "hello"


def test_read_js_reads_dir(tmp_path):
    (tmp_path / "a.js").write_text("hi")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.js").write_text("there")
    (tmp_path / "c.txt").write_text("ignored")
    code = MetricsCollector.read_js(tmp_path)
    assert "hi" in code
    assert "there" in code
    assert "ignored" not in code


def test_structural_runs_engine(collector):
    result = collector.structural(SOURCE)
    assert result.chepin.predicate == ["x"]
    assert result.property("Gilb CL (amount of ifs)") == "1"


def test_structural_bounds_tree_size():
    with pytest.raises(TreeTooLargeError):
        MetricsCollector(max_tree_nodes=1).structural(SOURCE)


def test_save_csv_writes_all_tables(collector, tmp_path):
    result = collector.structural(SOURCE)
    written = collector.save_csv(result, tmp_path / "out")

    assert [p.name for p in written] == [
        "operators.csv", "operands.csv", "properties.csv", "chepin.csv",
    ]
    operators = read_rows(tmp_path / "out" / "operators.csv")
    assert operators[0] == ["operator", "count"]
    assert ["print()", "1"] in operators
    assert len(operators) == 1 + len(result.operators)

    properties = read_rows(tmp_path / "out" / "properties.csv")
    assert properties[1:] == [list(p) for p in result.properties]

    chepin = read_rows(tmp_path / "out" / "chepin.csv")
    assert ["P", "x"] in chepin


def test_main_prints_report(tmp_path, capsys):
    src = tmp_path / "prog.js"
    src.write_text(SOURCE, encoding="utf-8")
    assert main([str(src), "--output-dir", str(tmp_path / "csv"), "-q"]) == 0

    out = capsys.readouterr().out
    assert "Program statements" in out
    assert "P: x" in out
    assert (tmp_path / "csv" / "properties.csv").exists()


def test_main_reports_unmeasurable_source(tmp_path):
    src = tmp_path / "bad.js"
    src.write_text("let { a } = obj;", encoding="utf-8")
    assert main([str(src), "-q"]) == 1


def test_read_js_rejects_invalid_utf8(tmp_path):
    (tmp_path / "ok.js").write_text("let a = 1;", encoding="utf-8")
    (tmp_path / "bad.js").write_bytes(b"let s = '\xff\xfe';")
    with pytest.raises(SourceEncodingError) as info:
        MetricsCollector.read_js(tmp_path)
    assert info.value.details["path"] == str(tmp_path / "bad.js")


def test_main_reports_undecodable_source(tmp_path):
    src = tmp_path / "bad.js"
    src.write_bytes(b"let s = '\xff\xfe';")
    assert main([str(src), "-q"]) == 1


def test_structural_measures_deeply_nested_source(collector):
    result = collector.structural("let s = " + " + ".join(["a"] * 3000) + ";")
    assert result.operators["+"] == 2999
