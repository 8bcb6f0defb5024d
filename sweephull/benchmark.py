import argparse
import time

import pandas as pd

from sweephull import distributions
from sweephull.triangulation import triangulate

GENERATORS = {
    "uniform": lambda n, seed: distributions.uniform_square(n, seed=seed),
    "gaussian": lambda n, seed: distributions.gaussian(n, seed=seed),
    "clustered": lambda n, seed: distributions.gaussian_mixture(max(n // 3, 1), seed=seed),
}


def benchmark(ns, distribution="uniform", repeats=1, seed=42, csv_filename=None):
    """
    Time triangulate() for each n in ns.

    Returns a DataFrame with one row per (n, repeat); also written to
    csv_filename when given.
    """
    generate = GENERATORS[distribution]
    results = []
    for n in ns:
        coords = distributions.flatten(generate(n, seed))
        for r in range(repeats):
            start = time.perf_counter()
            result = triangulate(coords)
            elapsed = time.perf_counter() - start
            results.append({
                "distribution": distribution,
                "n": len(coords) // 2,
                "repeat": r,
                "time_s": elapsed,
                "triangles": result.triangle_count,
                "hull": len(result.hull),
            })

    df = pd.DataFrame(results)
    if csv_filename is not None:
        df.to_csv(csv_filename, index=False)
    return df


def main(argv=None):
    parser = argparse.ArgumentParser(description="Time the sweep-hull triangulator.")
    parser.add_argument('ns', nargs='*', type=int, default=[100, 1000, 10000])
    parser.add_argument('--distribution', choices=sorted(GENERATORS), default='uniform')
    parser.add_argument('--repeats', type=int, default=3)
    parser.add_argument('--seed', type=int, default=42)
    parser.add_argument('--csv', default=None)
    args = parser.parse_args(argv)

    df = benchmark(args.ns, args.distribution, args.repeats, args.seed, args.csv)
    print(df.groupby("n")["time_s"].describe()[["mean", "min", "max"]])
    if args.csv:
        print(f"Benchmark results saved to {args.csv}")
    return df


if __name__ == "__main__":
    main()
