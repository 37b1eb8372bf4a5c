#!/usr/bin/env python3
"""
Performance Analysis & Visualization
Compares the cell-by-cell Grid engine with the vectorized NumPy engine using
the CSV written by `python -m game_of_life --benchmark`.
"""

import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns
from matplotlib.gridspec import GridSpec

plt.style.use('seaborn-v0_8-darkgrid')
sns.set_palette("husl")
COLORS = {
    'cells': '#2E86AB',    # ocean blue
    'numpy': '#F18F01',    # orange
    'speedup': '#06A77D',  # teal
}

TITLE_FONT = {'family': 'sans-serif', 'weight': 'bold', 'size': 16}
LABEL_FONT = {'family': 'sans-serif', 'weight': 'normal', 'size': 12}

CSV_PATHS = ['benchmarks/benchmark_engines.csv',
             '../benchmarks/benchmark_engines.csv']


def load_data(paths: list[str] | None = None) -> pd.DataFrame | None:
    """Load benchmark data from the first CSV that exists."""
    for path in paths or CSV_PATHS:
        if Path(path).exists():
            df = pd.read_csv(path)
            print(f"Loaded {len(df)} records from {path}")
            return df
    return None


def calculate_speedup(df: pd.DataFrame) -> pd.DataFrame:
    """Per-size speedup of the numpy engine over the cells engine."""
    # repeated sizes in one run are averaged
    pivot = df.pivot_table(index='size', columns='engine',
                           values='time_per_generation_ms', aggfunc='mean')
    if 'cells' not in pivot.columns or 'numpy' not in pivot.columns:
        return pd.DataFrame(columns=['size', 'speedup'])
    speedup = (pivot['cells'] / pivot['numpy']).rename('speedup')
    return speedup.reset_index().dropna()


def create_dashboard(df: pd.DataFrame, speedup: pd.DataFrame):
    """Time per generation, throughput and speedup side by side."""
    fig = plt.figure(figsize=(18, 6))
    fig.patch.set_facecolor('white')
    gs = GridSpec(1, 3, figure=fig, wspace=0.3)

    fig.suptitle('Game of Life: Engine Performance', fontsize=22,
                 fontweight='bold', color=COLORS['cells'], y=1.02)

    # PANEL 1: Time per generation (log scale)
    ax1 = fig.add_subplot(gs[0, 0])
    for engine, data in df.groupby('engine'):
        data = data.sort_values('size')
        ax1.plot(data['size'], data['time_per_generation_ms'], marker='o',
                 linewidth=3, markersize=10, label=engine,
                 color=COLORS.get(engine), markeredgecolor='white', markeredgewidth=2)
    ax1.set_xscale('log', base=2)
    ax1.set_yscale('log')
    ax1.set_xlabel('Grid size (cells per side)', **LABEL_FONT)
    ax1.set_ylabel('Time per generation (ms)', **LABEL_FONT)
    ax1.set_title('Time per Generation', **TITLE_FONT, pad=15)
    ax1.legend(framealpha=0.95)

    # PANEL 2: Throughput bars
    ax2 = fig.add_subplot(gs[0, 1])
    sns.barplot(data=df, x='size', y='cells_per_second_million', hue='engine',
                palette=COLORS, ax=ax2)
    ax2.set_xlabel('Grid size (cells per side)', **LABEL_FONT)
    ax2.set_ylabel('Throughput (M cells/s)', **LABEL_FONT)
    ax2.set_title('Throughput', **TITLE_FONT, pad=15)

    # PANEL 3: Speedup
    ax3 = fig.add_subplot(gs[0, 2])
    if not speedup.empty:
        ax3.plot(speedup['size'], speedup['speedup'], marker='D', linewidth=3,
                 markersize=10, color=COLORS['speedup'])
        for _, row in speedup.iterrows():
            ax3.annotate(f"{row['speedup']:.1f}x", (row['size'], row['speedup']),
                         textcoords='offset points', xytext=(0, 10), ha='center')
        ax3.axhline(y=1, color='gray', linestyle='--', linewidth=2, alpha=0.5)
        ax3.set_xscale('log', base=2)
    ax3.set_xlabel('Grid size (cells per side)', **LABEL_FONT)
    ax3.set_ylabel('Speedup (cells / numpy)', **LABEL_FONT)
    ax3.set_title('NumPy Speedup', **TITLE_FONT, pad=15)

    for ax in (ax1, ax2, ax3):
        ax.set_facecolor('#f8f9fa')
        ax.grid(True, alpha=0.3, linestyle='--')

    return fig


def print_summary(df: pd.DataFrame, speedup: pd.DataFrame) -> None:
    print("\n" + "=" * 60)
    print("PERFORMANCE SUMMARY")
    print("=" * 60)
    for engine, data in df.groupby('engine'):
        best = data.loc[data['cells_per_second_million'].idxmax()]
        print(f"{engine:>8}: peak {best['cells_per_second_million']:.2f} M cells/s "
              f"at {int(best['size'])}x{int(best['size'])}")
    if not speedup.empty:
        print(f"Mean numpy speedup: {np.mean(speedup['speedup']):.1f}x "
              f"(max {speedup['speedup'].max():.1f}x)")
    print("=" * 60 + "\n")


def main():
    print("\nLoading benchmark data...")
    df = load_data(sys.argv[1:] or None)

    if df is None:
        print("\n\033[0;31mError: No benchmark data found!\033[0m")
        print("\nPlease run benchmarks first:")
        print("  python -m game_of_life --benchmark")
        sys.exit(1)

    speedup = calculate_speedup(df)

    output_dir = Path('benchmarks')
    output_dir.mkdir(exist_ok=True)

    print("  Creating performance dashboard...")
    fig = create_dashboard(df, speedup)
    output_path = output_dir / 'performance_dashboard.png'
    fig.savefig(output_path, dpi=300, bbox_inches='tight', facecolor='white')
    print(f"    Saved: {output_path}")

    print_summary(df, speedup)

    print("Analysis complete!")
    print("\nShowing interactive plots...")
    plt.show()


if __name__ == "__main__":
    main()
