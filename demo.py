"""
Ordered Tree Demo -- Deletion walkthrough, degeneration under sorted insertion,
operation timing, and cursor-driven filtering.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Combined PDF report
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
from ordered_tree import OrderedTree, CursorStateError

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "dark": "#2c3e50",
}

SIZES = [50, 100, 200, 400, 800, 1600]
TRIALS = 5


# ---------------------------------------------------------------------------
# Example 1: Deletion and Cursor Walkthrough
# ---------------------------------------------------------------------------
def example_1_walkthrough():
    """Show the three deletion cases and a removal during iteration."""
    print("=" * 60)
    print("Example 1: Deletion and Cursor Walkthrough")
    print("=" * 60)

    tree = OrderedTree([5, 3, 8, 1, 4, 7, 9])
    print("\n  Built from [5, 3, 8, 1, 4, 7, 9]:")
    print(tree.render())

    print(f"\n  Successor of 4: {tree.find(4).successor().key}")
    print(f"  Successor of 9: {tree.find(9).successor()}")

    tree.remove(5)
    print("\n  After removing 5 (two children, successor 7 spliced up):")
    print(tree.render())
    print(f"  In order: {tree.in_order()}, size={tree.size()}")

    tree.remove(1)
    tree.remove(3)
    print("\n  After removing leaf 1 and single-child 3:")
    print(tree.render())

    tree = OrderedTree(range(1, 6))
    cursor = tree.cursor()
    for key in cursor:
        if key % 2 == 0:
            cursor.remove()
    print(f"\n  {{1..5}} with evens removed through the cursor: {tree.in_order()}")
    try:
        tree.cursor().remove()
    except CursorStateError as exc:
        print(f"  Remove before the first advance: CursorStateError({exc})")


# ---------------------------------------------------------------------------
# Example 2: Height vs Size
# ---------------------------------------------------------------------------
def example_2_height_vs_size():
    """Sorted insertion builds a list; shuffled insertion stays logarithmic."""
    print("\n" + "=" * 60)
    print("Example 2: Height vs Size")
    print("=" * 60)

    sorted_heights = []
    shuffled_heights = []
    for n in SIZES:
        sorted_heights.append(OrderedTree(range(n)).height())
        trial_heights = [
            OrderedTree(np.random.permutation(n).tolist()).height() for _ in range(TRIALS)
        ]
        shuffled_heights.append(np.mean(trial_heights))
        print(f"  n={n:5d}  sorted height={sorted_heights[-1]:5d}  "
              f"shuffled mean height={shuffled_heights[-1]:6.1f}  "
              f"log2(n)={np.log2(n):5.1f}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))

    axes[0].plot(SIZES, sorted_heights, "o-", color=COLORS["red"], label="Sorted insertion")
    axes[0].plot(SIZES, shuffled_heights, "o-", color=COLORS["green"], label="Shuffled insertion")
    axes[0].set_xlabel("Number of keys")
    axes[0].set_ylabel("Tree height")
    axes[0].set_title("Height grows linearly under sorted insertion",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(SIZES, shuffled_heights, "o-", color=COLORS["green"], label="Shuffled insertion")
    axes[1].plot(SIZES, 2 * np.log2(SIZES), "--", color=COLORS["dark"], label="2 log2 n")
    axes[1].set_xscale("log")
    axes[1].set_xlabel("Number of keys (log scale)")
    axes[1].set_ylabel("Mean tree height")
    axes[1].set_title("Random insertion order: height ~ O(log n)",
                      fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "02_height_vs_size.png", dpi=150, bbox_inches="tight")
    plt.close(fig)


# ---------------------------------------------------------------------------
# Example 3: Timing
# ---------------------------------------------------------------------------
def time_build_and_lookup(keys):
    start = time.perf_counter()
    tree = OrderedTree(keys)
    build_time = time.perf_counter() - start

    start = time.perf_counter()
    for key in keys:
        tree.contains(key)
    lookup_time = time.perf_counter() - start
    return build_time, lookup_time


def example_3_timing():
    """Wall-clock cost of add and contains for both insertion orders."""
    print("\n" + "=" * 60)
    print("Example 3: Timing")
    print("=" * 60)

    results = {"sorted": [], "shuffled": []}
    for n in SIZES:
        sorted_times = time_build_and_lookup(list(range(n)))
        shuffled_times = time_build_and_lookup(np.random.permutation(n).tolist())
        results["sorted"].append(sorted_times)
        results["shuffled"].append(shuffled_times)
        print(f"  n={n:5d}  sorted build={sorted_times[0] * 1e3:8.2f} ms  "
              f"lookup={sorted_times[1] * 1e3:8.2f} ms  |  "
              f"shuffled build={shuffled_times[0] * 1e3:6.2f} ms  "
              f"lookup={shuffled_times[1] * 1e3:6.2f} ms")

    sorted_arr = np.array(results["sorted"]) * 1e3
    shuffled_arr = np.array(results["shuffled"]) * 1e3

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    for ax, column, label in [(axes[0], 0, "Build (n adds)"), (axes[1], 1, "n lookups")]:
        ax.plot(SIZES, sorted_arr[:, column], "o-", color=COLORS["red"], label="Sorted insertion")
        ax.plot(SIZES, shuffled_arr[:, column], "o-", color=COLORS["green"],
                label="Shuffled insertion")
        ax.set_xlabel("Number of keys")
        ax.set_ylabel("Time (ms)")
        ax.set_title(f"{label}: O(n^2) vs O(n log n)", fontsize=10, fontweight="bold")
        ax.legend(fontsize=9)
        ax.grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "03_timing.png", dpi=150, bbox_inches="tight")
    plt.close(fig)


# ---------------------------------------------------------------------------
# Example 4: Cursor Filtering
# ---------------------------------------------------------------------------
def example_4_cursor_filtering():
    """Drop keys in place while iterating, and track the size as it shrinks."""
    print("\n" + "=" * 60)
    print("Example 4: Cursor Filtering")
    print("=" * 60)

    keys = np.random.randint(0, 500, size=1000).tolist()
    tree = OrderedTree(keys)
    cursor = tree.cursor()

    visited = []
    sizes = []
    for key in cursor:
        visited.append(key)
        if key % 3 == 0:
            cursor.remove()
        sizes.append(tree.size())

    expected = sorted(k for k in keys if k % 3 != 0)
    assert visited == sorted(keys), "Cursor skipped or repeated keys"
    assert tree.in_order() == expected, "Filtered contents mismatch"
    print(f"  Started with {len(keys)} keys, visited {len(visited)}, kept {tree.size()}")
    print("  Every key visited exactly once, survivors still in order.")

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(np.arange(1, len(sizes) + 1), sizes, color=COLORS["blue"])
    ax.axhline(len(expected), linestyle="--", color=COLORS["orange"],
               label=f"Final size ({len(expected)})")
    ax.set_xlabel("Keys visited")
    ax.set_ylabel("Tree size")
    ax.set_title("Removing multiples of 3 through the cursor", fontsize=10, fontweight="bold")
    ax.legend(fontsize=9)
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "04_cursor_filtering.png", dpi=150, bbox_inches="tight")
    plt.close(fig)


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Ordered Tree", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "An unbalanced binary search tree with a removable cursor",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "Keys are kept in a binary search tree with parent links.\n"
            "Deletion of a node with two children splices out its in-order\n"
            "successor. No rebalancing is done, so sorted input degenerates\n"
            "the tree into a linked list.\n\n"
            "This demo covers:\n"
            "  1. Deletion cases and cursor removal\n"
            "  2. Height vs size for sorted and shuffled input\n"
            "  3. Timing of add and contains\n"
            "  4. Filtering in place through the cursor\n\n"
            f"Sizes: {SIZES}\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.32, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "02_height_vs_size.png": "Example 2: Height vs Size",
            "03_timing.png": "Example 3: Timing",
            "04_cursor_filtering.png": "Example 4: Cursor Filtering",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Ordered Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print(f"Sizes: {SIZES}")
    print()

    example_1_walkthrough()
    example_2_height_vs_size()
    example_3_timing()
    example_4_cursor_filtering()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
