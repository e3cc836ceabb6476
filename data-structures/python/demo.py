"""
Binary Heap Demo -- Ordering walkthrough, comparison-count scaling, heap sort
timing, and heap-shape visualization.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_heap import BinaryHeap, min_heap, max_heap

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

SIZES = [2 ** k for k in range(4, 15)]


class CountingComparator:
    """Wraps a comparator and counts how often it is called."""

    def __init__(self, comparator):
        self.comparator = comparator
        self.calls = 0

    def __call__(self, a, b):
        self.calls += 1
        return self.comparator(a, b)


def heap_sort(values, descending=False):
    heap = max_heap() if descending else min_heap()
    for v in values:
        heap.add(v)
    return list(heap)


# ---------------------------------------------------------------------------
# Example 1: Min vs Max Ordering
# ---------------------------------------------------------------------------
def example_1_ordering():
    """Same input, two comparators, two extraction orders."""
    print("=" * 60)
    print("Example 1: Min vs Max Ordering")
    print("=" * 60)

    values = [4, 2, 9, 11]
    orders = {}
    for name, heap in (("min", min_heap()), ("max", max_heap())):
        for v in values:
            heap.add(v)
        drained = [heap.extract_top() for _ in range(3)]
        heap.add(1)
        drained.extend(heap)
        orders[name] = drained
        print(f"  {name}-heap: inserted {values}, extracted 3, added 1 -> {drained}")

    assert orders["min"] == [2, 4, 9, 1, 11]
    assert orders["max"] == [11, 9, 4, 2, 1]

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    for ax, (name, color) in zip(axes, (("min", COLORS["blue"]), ("max", COLORS["red"]))):
        seq = orders[name]
        ax.bar(range(len(seq)), seq, color=color, edgecolor="white")
        for i, v in enumerate(seq):
            ax.text(i, v + 0.2, str(v), ha="center", va="bottom", fontweight="bold")
        ax.axvline(2.5, color=COLORS["dark"], linestyle="--", linewidth=1)
        ax.text(2.55, max(seq) * 0.9, "add(1)", fontsize=9, color=COLORS["dark"])
        ax.set_xlabel("Extraction step")
        ax.set_ylabel("Value")
        ax.set_title(f"{name}-heap extraction order", fontsize=11, fontweight="bold")
        ax.grid(True, alpha=0.3, axis="y")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_ordering.png", dpi=150)
    plt.close(fig)

    return fig, orders


# ---------------------------------------------------------------------------
# Example 2: Comparison Counts vs n log n
# ---------------------------------------------------------------------------
def example_2_comparison_counts():
    """Count comparator calls for n adds followed by n extractions."""
    print("\n" + "=" * 60)
    print("Example 2: Comparison Counts vs n log2 n")
    print("=" * 60)

    add_calls = []
    extract_calls = []
    for n in SIZES:
        counter = CountingComparator(lambda a, b: a < b)
        heap = BinaryHeap(counter)
        for v in np.random.rand(n):
            heap.add(v)
        add_calls.append(counter.calls)
        counter.calls = 0
        while heap:
            heap.extract_top()
        extract_calls.append(counter.calls)

    sizes = np.array(SIZES, dtype=float)
    nlogn = sizes * np.log2(sizes)
    add_ratio = np.array(add_calls) / nlogn
    extract_ratio = np.array(extract_calls) / nlogn

    for n, a, e, r_add, r_ext in zip(SIZES, add_calls, extract_calls, add_ratio, extract_ratio):
        print(f"  n={n:>6}: add {a:>9,} ({r_add:.3f} n log n), extract {e:>9,} ({r_ext:.3f} n log n)")

    slope, _ = np.polyfit(np.log2(sizes), np.log2(np.array(extract_calls)), 1)
    print(f"  Log-log slope of extraction comparisons: {slope:.3f}")

    fig, axes = plt.subplots(1, 2, figsize=(13, 5))
    axes[0].loglog(SIZES, add_calls, "o-", color=COLORS["blue"], label="add (random input)")
    axes[0].loglog(SIZES, extract_calls, "s-", color=COLORS["red"], label="extract_top")
    axes[0].loglog(SIZES, nlogn, "k--", label="n log2 n")
    axes[0].set_xlabel("n")
    axes[0].set_ylabel("Comparator calls")
    axes[0].set_title("Total comparator calls", fontsize=11, fontweight="bold")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3, which="both")

    axes[1].semilogx(SIZES, add_ratio, "o-", color=COLORS["blue"], label="add")
    axes[1].semilogx(SIZES, extract_ratio, "s-", color=COLORS["red"], label="extract_top")
    axes[1].set_xlabel("n")
    axes[1].set_ylabel("calls / (n log2 n)")
    axes[1].set_title("Normalized comparator calls\nRandom inserts sift up O(1) on average",
                      fontsize=11, fontweight="bold")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_comparisons.png", dpi=150)
    plt.close(fig)

    return fig, (add_calls, extract_calls)


# ---------------------------------------------------------------------------
# Example 3: Heap Sort Timing
# ---------------------------------------------------------------------------
def example_3_heap_sort_timing():
    """Heap sort through the heap against the built-in sorted()."""
    print("\n" + "=" * 60)
    print("Example 3: Heap Sort Timing")
    print("=" * 60)

    heap_times = []
    builtin_times = []
    for n in SIZES:
        values = np.random.randint(0, n, size=n).tolist()

        start = time.perf_counter()
        result = heap_sort(values)
        heap_times.append(time.perf_counter() - start)

        start = time.perf_counter()
        expected = sorted(values)
        builtin_times.append(time.perf_counter() - start)

        assert result == expected, f"heap sort mismatch at n={n}"
        print(f"  n={n:>6}: heap {heap_times[-1] * 1e3:8.2f} ms, "
              f"sorted {builtin_times[-1] * 1e3:8.3f} ms")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.loglog(SIZES, np.array(heap_times) * 1e3, "o-", color=COLORS["purple"], label="BinaryHeap sort")
    ax.loglog(SIZES, np.array(builtin_times) * 1e3, "s-", color=COLORS["green"], label="sorted()")
    ax.set_xlabel("n")
    ax.set_ylabel("Time (ms)")
    ax.set_title("Heap sort vs built-in sort", fontsize=11, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3, which="both")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_timing.png", dpi=150)
    plt.close(fig)

    return fig, (heap_times, builtin_times)


# ---------------------------------------------------------------------------
# Example 4: Heap Shape
# ---------------------------------------------------------------------------
def _draw_tree(ax, heap, title, color):
    items = heap._items
    count = heap.size()
    depth = int(np.floor(np.log2(count))) + 1 if count else 1
    positions = {}
    for i in range(1, count + 1):
        level = int(np.floor(np.log2(i)))
        offset = i - 2 ** level
        x = (offset + 0.5) / 2 ** level
        positions[i] = (x, depth - level)

    for i in range(2, count + 1):
        x0, y0 = positions[i // 2]
        x1, y1 = positions[i]
        ax.plot([x0, x1], [y0, y1], color="gray", linewidth=1, zorder=1)
    for i, (x, y) in positions.items():
        ax.scatter(x, y, s=600, color=color, edgecolors="white", zorder=2)
        ax.text(x, y, str(items[i]), ha="center", va="center", color="white",
                fontsize=9, fontweight="bold", zorder=3)
    ax.set_title(title, fontsize=11, fontweight="bold")
    ax.set_xlim(-0.05, 1.05)
    ax.set_ylim(0.3, depth + 0.7)
    ax.axis("off")


def example_4_heap_shape():
    """Draw the array layout of a min-heap and a max-heap as trees."""
    print("\n" + "=" * 60)
    print("Example 4: Heap Shape")
    print("=" * 60)

    values = np.random.randint(1, 100, size=15).tolist()
    print(f"  Input: {values}")

    heaps = []
    for name, heap in (("min", min_heap()), ("max", max_heap())):
        for v in values:
            heap.add(v)
        print(f"  {name}-heap array: {heap._items[1:]}")
        heaps.append((name, heap))

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    for ax, (name, heap), color in zip(axes, heaps, (COLORS["blue"], COLORS["red"])):
        _draw_tree(ax, heap, f"{name}-heap after {len(values)} adds", color)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_shape.png", dpi=150)
    plt.close(fig)

    return fig, heaps


def generate_pdf_report(figures_data):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Binary Heap", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Comparator-Driven Priority Queue", fontsize=24, ha="center")
        fig.text(0.5, 0.35, "Demonstration & Analysis Report", fontsize=18, ha="center", style="italic")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Summary", fontsize=24, ha="center", fontweight="bold")

        summary_text = """
This report demonstrates an array-backed binary heap whose ordering is
set by a single comparator function.

- One structure, two orderings:
  - new_min() installs a < b
  - new_max() installs a > b

- Operations:
  - add: sift-up, O(log n)
  - extract_top: sift-down, O(log n), None when empty
  - iteration drains the heap in priority order

Key Findings:
  1. Min and max heaps differ only in the comparator
  2. Extraction costs about 2 log2 n comparisons per element
  3. Random inserts settle after a constant number of comparisons
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for title, image in figures_data:
            fig_copy = plt.figure(figsize=(11, 8.5))
            fig_copy.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            img = plt.imread(VIZ_DIR / image)
            ax = fig_copy.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig_copy)
            plt.close(fig_copy)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 22 + "BINARY HEAP DEMO" + " " * 20 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_ordering()
    example_2_comparison_counts()
    example_3_heap_sort_timing()
    example_4_heap_shape()

    figures = [
        ("Example 1: Ordering", "01_ordering.png"),
        ("Example 2: Comparisons", "02_comparisons.png"),
        ("Example 3: Timing", "03_timing.png"),
        ("Example 4: Shape", "04_shape.png"),
    ]
    generate_pdf_report(figures)

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
