import math

import pandas as pd
import pytest

from data.data_loader import (
    load_expression_dataset,
    evaluate_expression_column,
    summarize_results,
    save_results
)


def test_load_csv(tmp_path):
    path = tmp_path / "expressions.csv"
    pd.DataFrame({"id": [1, 2], "expression": ["2+3", "6/3"]}).to_csv(path, index=False)

    expressions = load_expression_dataset(str(path))
    assert list(expressions) == ["2+3", "6/3"]


def test_load_csv_custom_column(tmp_path):
    path = tmp_path / "expressions.csv"
    pd.DataFrame({"formula": ["1-1"]}).to_csv(path, index=False)

    assert list(load_expression_dataset(str(path), "formula")) == ["1-1"]


def test_load_csv_missing_column(tmp_path):
    path = tmp_path / "expressions.csv"
    pd.DataFrame({"formula": ["1-1"]}).to_csv(path, index=False)

    with pytest.raises(ValueError):
        load_expression_dataset(str(path))


def test_load_text_skips_blank_lines(tmp_path):
    path = tmp_path / "expressions.txt"
    path.write_text("2*3\n\n  10/2-3  \n", encoding="utf-8")

    assert list(load_expression_dataset(str(path))) == ["2*3", "10/2-3"]


def test_evaluate_expression_column_records_errors():
    results = evaluate_expression_column(pd.Series(["3*4+2", "2&3", "5/0"]))

    assert list(results.columns) == ["expression", "result", "error"]
    assert results.loc[0, "result"] == 14.0
    assert results.loc[0, "error"] == ""
    assert math.isnan(results.loc[1, "result"])
    assert results.loc[1, "error"].startswith("FormatError")
    assert results.loc[2, "error"].startswith("DivisionByZero")

    assert summarize_results(results) == {"total": 3, "succeeded": 1, "failed": 2}


def test_save_results(tmp_path):
    results = evaluate_expression_column(pd.Series(["1+1"]))
    output_path = save_results(results, str(tmp_path / "out.csv"))

    saved = pd.read_csv(output_path, keep_default_na=False)
    assert saved.loc[0, "expression"] == "1+1"
    assert saved.loc[0, "result"] == 2.0
