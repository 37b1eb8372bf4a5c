import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from analyze_performance import calculate_speedup, create_dashboard, load_data, print_summary
from game_of_life.simulation import benchmark


def make_frame(rows):
    return pd.DataFrame(rows, columns=["engine", "size", "generations", "total_time_ms",
                                       "time_per_generation_ms", "cells_per_second_million"])


@pytest.fixture
def two_engine_frame():
    return make_frame([
        ("cells", 16, 10, 40.0, 4.0, 0.64),
        ("numpy", 16, 10, 1.0, 0.1, 25.6),
        ("cells", 32, 10, 160.0, 16.0, 0.64),
        ("numpy", 32, 10, 2.0, 0.2, 51.2),
    ])


def test_load_data_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_data() is None
    assert load_data([str(tmp_path / "absent.csv")]) is None


def test_load_data_reads_first_existing(tmp_path, two_engine_frame):
    path = tmp_path / "engines.csv"
    two_engine_frame.to_csv(path, index=False)
    df = load_data([str(tmp_path / "absent.csv"), str(path)])
    assert len(df) == 4
    assert list(df["engine"].unique()) == ["cells", "numpy"]


def test_calculate_speedup(two_engine_frame):
    speedup = calculate_speedup(two_engine_frame)
    assert list(speedup["size"]) == [16, 32]
    assert list(speedup["speedup"]) == pytest.approx([40.0, 80.0])


def test_calculate_speedup_single_engine(two_engine_frame):
    numpy_only = two_engine_frame[two_engine_frame["engine"] == "numpy"]
    speedup = calculate_speedup(numpy_only)
    assert speedup.empty
    assert list(speedup.columns) == ["size", "speedup"]


def test_calculate_speedup_averages_repeated_sizes(tmp_path):
    path = tmp_path / "engines.csv"
    benchmark(sizes=[8, 8], generations=1, seed=1, csv_path=path)
    speedup = calculate_speedup(pd.read_csv(path))
    assert list(speedup["size"]) == [8]
    assert speedup["speedup"].iloc[0] > 0


def test_create_dashboard(two_engine_frame):
    fig = create_dashboard(two_engine_frame, calculate_speedup(two_engine_frame))
    try:
        assert len(fig.axes) == 3
        assert fig.axes[2].get_title() == "NumPy Speedup"
    finally:
        plt.close(fig)


def test_create_dashboard_without_speedup(two_engine_frame):
    numpy_only = two_engine_frame[two_engine_frame["engine"] == "numpy"]
    fig = create_dashboard(numpy_only, calculate_speedup(numpy_only))
    try:
        assert len(fig.axes) == 3
        assert not fig.axes[2].lines
    finally:
        plt.close(fig)


def test_print_summary(two_engine_frame, capsys):
    print_summary(two_engine_frame, calculate_speedup(two_engine_frame))
    out = capsys.readouterr().out
    assert "cells: peak 0.64 M cells/s at 16x16" in out
    assert "numpy: peak 51.20 M cells/s at 32x32" in out
    assert "Mean numpy speedup: 60.0x (max 80.0x)" in out
