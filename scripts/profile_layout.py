"""
Profiling script for PyLinkChart layout performance.

Times every registered layout on random charts of increasing size and
prints the hottest functions of the slowest runs.
"""

import cProfile
import pstats
import io
from pstats import SortKey
import time
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
from pylinkchart import Item, Link, LAYOUT_NAMES, apply_layout, calculate_fit_params


ITEM_TYPES = ['person', 'email', 'phone', 'location', 'vehicle', 'event']


def create_chart(n_items, n_links, seed=42):
    """Create a random chart with n items and approximately n_links links."""
    rng = np.random.default_rng(seed)
    items = [
        Item(i, ITEM_TYPES[int(rng.integers(len(ITEM_TYPES)))], int(rng.integers(0, 10**12)))
        for i in range(n_items)
    ]

    links = []
    for source, target in rng.integers(0, n_items, size=(n_links, 2)):
        if source != target:
            links.append(Link(int(source), int(target)))

    return items, links


def time_layouts(n_items, n_links):
    """Run every layout once and print its wall time."""
    items, links = create_chart(n_items, n_links)
    print(f"\n{n_items} items, {len(links)} links")
    for name in LAYOUT_NAMES:
        start_time = time.perf_counter()
        positions = apply_layout(name, items, links, rng=np.random.default_rng(0))
        calculate_fit_params(positions, 1920, 1080)
        elapsed = time.perf_counter() - start_time
        print(f"  {name:<16} {elapsed * 1000:9.1f} ms")


def profile_layout(name, n_items, n_links):
    """Profile one layout and print the top functions."""
    items, links = create_chart(n_items, n_links)

    profiler = cProfile.Profile()
    profiler.enable()
    apply_layout(name, items, links, rng=np.random.default_rng(0))
    profiler.disable()

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(SortKey.CUMULATIVE)
    ps.print_stats(15)

    print(f"\n{'=' * 60}")
    print(f"Profiling: {name} ({n_items} items, {n_links} links)")
    print('=' * 60)
    print(s.getvalue())
    return profiler


def main():
    """Run all timing and profiling scenarios."""
    print("PyLinkChart Performance Profiling")
    print("=" * 60)

    for n_items, n_links in [(20, 30), (100, 200), (400, 800)]:
        time_layouts(n_items, n_links)

    for name in ('force', 'compactPeacock', 'tree'):
        profiler = profile_layout(name, 400, 800)
        filename = f"profile_{name}.prof"
        profiler.dump_stats(filename)
        print(f"Saved: {filename}")

    print("\nTo view detailed profile, use:")
    print("  python -m pstats <profile_file>")


if __name__ == "__main__":
    main()
