# experiments/plot_heatmap.py
"""
Plot a heatmap of per-bit ones frequency: x axis = bit position (0 = lowest),
y axis = generator variant, cell value = mean frequency over trials.

CSV expected columns: variant, trial, bit, frequency
 - variant: str ('starstar', 'plus')
 - trial: int (stream id)
 - bit: int (0..63)
 - frequency: float in [0, 1]

Usage:
    python -m xoshiro_project.experiments.plot_heatmap --csv results/bits_XXXX.csv --out heatmap.png
"""

import argparse
import os

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

REQUIRED = {'variant', 'trial', 'bit', 'frequency'}


def prepare_pivot(df):
    # mean frequency for each (variant, bit)
    agg = df.groupby(['variant', 'bit'], as_index=False)['frequency'].mean()
    pivot = agg.pivot(index='variant', columns='bit', values='frequency')
    pivot = pivot.sort_index()
    return pivot


def plot_heatmap(pivot, title='Bit Frequency Heatmap', out_file=None, show=True):
    rows = pivot.index.tolist()
    cols = pivot.columns.tolist()
    # distance from the ideal 0.5 is what matters, keep the colour scale tight
    data = pivot.values
    spread = max(float(np.nanmax(np.abs(data - 0.5))), 1e-3)

    fig, ax = plt.subplots(figsize=(0.2 * len(cols) + 3, 0.6 * len(rows) + 2))
    im = ax.imshow(data, aspect='auto', interpolation='nearest', cmap='coolwarm',
                   vmin=0.5 - spread, vmax=0.5 + spread)

    ax.set_xticks(np.arange(0, len(cols), 8))
    ax.set_xticklabels(cols[::8])
    ax.set_yticks(np.arange(len(rows)))
    ax.set_yticklabels(rows)
    ax.set_xlabel('Bit position')
    ax.set_ylabel('Variant')
    ax.set_title(title)

    cbar = fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04)
    cbar.set_label('Mean ones frequency')

    plt.tight_layout()
    if out_file:
        os.makedirs(os.path.dirname(out_file) or '.', exist_ok=True)
        plt.savefig(out_file, dpi=300)
        print(f"Heatmap saved to {out_file}")
    if show:
        plt.show()
    return fig


def load_csv(path):
    df = pd.read_csv(path)
    if not REQUIRED.issubset(set(df.columns)):
        raise SystemExit(f"CSV must contain columns: {REQUIRED}. Found: {df.columns.tolist()}")
    df['bit'] = df['bit'].astype(int)
    df['trial'] = df['trial'].astype(int)
    df['frequency'] = df['frequency'].astype(float)
    return df


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--csv', required=True, help='Path to bits CSV')
    parser.add_argument('--out', default='results/heatmap_bit_frequency.png', help='Output PNG path')
    parser.add_argument('--title', default='Bit Frequency Heatmap', help='Plot title')
    args = parser.parse_args()

    df = load_csv(args.csv)
    pivot = prepare_pivot(df)
    plot_heatmap(pivot, title=args.title, out_file=args.out)


if __name__ == '__main__':
    main()
