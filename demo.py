"""
Linked List Demo -- Basic usage walkthrough, a manually built list, positional
inserts, timing benchmarks for append / insert_at / reverse, and a one-million
node reversal.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import io
import sys
import time
from contextlib import redirect_stdout
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from linked_list import LinkedList, ListNode

SEED = 42
np.random.seed(SEED)

SIZES = [1_000, 5_000, 10_000, 25_000, 50_000, 100_000]
N_RUNS = 3
STRESS_SIZE = 1_000_000

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


def build_list(values):
    lst = LinkedList()
    for value in values:
        lst.append(value)
    return lst


def timed(func, *args):
    """Median wall-clock seconds of ``func(*args)`` with its output muted."""
    runs = []
    for _ in range(N_RUNS):
        with redirect_stdout(io.StringIO()):
            t0 = time.perf_counter()
            func(*args)
            runs.append(time.perf_counter() - t0)
    return float(np.median(runs))


# ---------------------------------------------------------------------------
# Example 1: Basic Usage
# ---------------------------------------------------------------------------
def example_1_basic_usage():
    print("=" * 60)
    print("Example 1: Basic Usage")
    print("=" * 60)

    lst = build_list([10, 20, 30, 40, 50])
    lst.print_list()

    print("\n--- Reversing List ---")
    lst.reverse()
    lst.print_list()

    assert str(lst) == "50 -> 40 -> 30 -> 20 -> 10"


# ---------------------------------------------------------------------------
# Example 2: Manually Built List
# ---------------------------------------------------------------------------
def example_2_custom_list():
    print("\n" + "=" * 60)
    print("Example 2: Manually Built List")
    print("=" * 60)

    node = ListNode("A")
    custom = LinkedList(node, node)
    custom.append("B")
    custom.append("C")
    custom.reverse()
    custom.print_list()

    assert custom.tail is node


# ---------------------------------------------------------------------------
# Example 3: Positional Inserts
# ---------------------------------------------------------------------------
def example_3_insert_at():
    print("\n" + "=" * 60)
    print("Example 3: Positional Inserts")
    print("=" * 60)

    lst = build_list([10, 20, 30])
    steps = [
        ("head (position 0)", 5, 0),
        ("middle (position 2)", 15, 2),
        ("past the end (position 99)", 99, 99),
        ("negative position", "bad", -1),
    ]
    for label, value, position in steps:
        status = lst.insert_at(value, position)
        result = "ok" if status else f"rejected: {status.message}"
        print(f"\n  insert {value!r} at {label}: {result}")
        print(f"    {lst}  (head={lst.head.value!r}, tail={lst.tail.value!r})")

    assert list(lst) == [5, 10, 15, 20, 30, 99]


# ---------------------------------------------------------------------------
# Example 4: Timing Benchmark
# ---------------------------------------------------------------------------
def example_4_timing_benchmark():
    """Append is O(1) per call, insert_at and reverse are O(n)."""
    print("\n" + "=" * 60)
    print("Example 4: Timing Benchmark")
    print("=" * 60)

    append_ms = []
    insert_ms = []
    reverse_ms = []

    print(f"\n  {'Size':>10} {'Append/op (us)':>16} {'Insert mid (ms)':>16} {'Reverse (ms)':>14}")
    print(f"  {'-' * 60}")

    for n in SIZES:
        values = np.random.randint(0, 1_000_000, size=n).tolist()

        t_build = timed(build_list, values)
        lst = build_list(values)
        t_insert = timed(lst.insert_at, -1, n // 2)
        t_reverse = timed(lst.reverse)

        append_ms.append(t_build / n * 1e6)
        insert_ms.append(t_insert * 1000)
        reverse_ms.append(t_reverse * 1000)
        print(f"  {n:>10,} {append_ms[-1]:>16.3f} {insert_ms[-1]:>16.3f} {reverse_ms[-1]:>14.3f}")

    sizes = np.array(SIZES, dtype=float)
    slope, intercept = np.polyfit(sizes, reverse_ms, 1)
    print(f"\n  Reverse linear fit: {slope * 1000:.4f} ms per 1,000 nodes "
          f"(intercept {intercept:.3f} ms)")

    fig, axes = plt.subplots(1, 3, figsize=(18, 5.5))

    axes[0].plot(SIZES, append_ms, "o-", color=COLORS["blue"], linewidth=2)
    axes[0].set_xlabel("List size")
    axes[0].set_ylabel("Time per append (us)")
    axes[0].set_title("append: constant cost per call\nTail pointer avoids a walk",
                      fontsize=10, fontweight="bold")
    axes[0].set_ylim(bottom=0)
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(SIZES, insert_ms, "s-", color=COLORS["orange"], linewidth=2)
    axes[1].set_xlabel("List size")
    axes[1].set_ylabel("Time (ms)")
    axes[1].set_title("insert_at(n // 2): linear walk\nTwo cursors to the splice point",
                      fontsize=10, fontweight="bold")
    axes[1].grid(True, alpha=0.3)

    axes[2].plot(SIZES, reverse_ms, "o-", color=COLORS["green"], linewidth=2, label="Measured")
    axes[2].plot(SIZES, slope * sizes + intercept, "--", color=COLORS["dark"],
                 alpha=0.7, label="Linear fit")
    axes[2].set_xlabel("List size")
    axes[2].set_ylabel("Time (ms)")
    axes[2].set_title("reverse: one pass, O(1) extra space\nprevious / current / following",
                      fontsize=10, fontweight="bold")
    axes[2].legend(fontsize=9)
    axes[2].grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "04_timing_benchmark.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("  Saved: viz/04_timing_benchmark.png")


# ---------------------------------------------------------------------------
# Example 5: One Million Nodes
# ---------------------------------------------------------------------------
def example_5_stress_reverse():
    print("\n" + "=" * 60)
    print(f"Example 5: Reversing {STRESS_SIZE:,} Nodes")
    print("=" * 60)

    t0 = time.perf_counter()
    lst = LinkedList()
    for i in range(1, STRESS_SIZE + 1):
        lst.append(i)
    t_build = time.perf_counter() - t0

    t0 = time.perf_counter()
    lst.reverse()
    t_reverse = time.perf_counter() - t0

    assert lst.head.value == STRESS_SIZE
    assert lst.head.next.value == STRESS_SIZE - 1
    assert lst.tail.value == 1 and lst.tail.next is None

    print(f"\n  Build: {t_build:.3f} s")
    print(f"  Reverse: {t_reverse:.3f} s")
    print(f"  head={lst.head.value:,}, head.next={lst.head.next.value:,}, tail={lst.tail.value}")


def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Singly Linked List", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Append, Positional Insert and In-Place Reversal",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "The list keeps a head and a tail reference, so append never walks.\n"
            "insert_at walks two cursors to the splice point and falls back to\n"
            "append when the position is past the end. reverse flips every link\n"
            "in a single pass using three references and no recursion.\n\n"
            f"Benchmark sizes: {', '.join(f'{n:,}' for n in SIZES)}\n"
            f"Stress size: {STRESS_SIZE:,}\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.35, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            fig.suptitle(viz_file.stem.replace("_", " ").title(), fontsize=14,
                         fontweight="bold", y=0.98)

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
    print("Linked List Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_basic_usage()
    example_2_custom_list()
    example_3_insert_at()
    example_4_timing_benchmark()
    example_5_stress_reverse()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
