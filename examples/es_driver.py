"""
Usage:
  python3 examples/es_driver.py --function himmelblau --iterations 500
"""
import argparse

from simplees import get_objective
from simplees import optimize

parser = argparse.ArgumentParser()
parser.add_argument(
    "--function",
    choices=["sphere", "himmelblau", "styblinski-tang", "rastrigin"],
    default="sphere",
)
parser.add_argument("--shift", type=float, nargs=2, default=None)
parser.add_argument("--npop", type=int, default=50)
parser.add_argument("--sigma", type=float, default=0.1)
parser.add_argument("--alpha", type=float, default=0.001)
parser.add_argument("--iterations", type=int, default=300)
parser.add_argument("--seed", type=int, default=None)
parser.add_argument("--skip-degenerate", action="store_true")
args = parser.parse_args()


def main():
    objective = get_objective(args.function, shift=args.shift)
    result = optimize(
        objective,
        dim=2,
        n_iterations=args.iterations,
        npop=args.npop,
        sigma=args.sigma,
        alpha=args.alpha,
        seed=args.seed,
        on_degenerate="skip" if args.skip_degenerate else "raise",
    )
    print(f"initial x: {result.x0}  f(x) = {result.initial_value:.5f}")
    print(f"final x:   {result.x}  f(x) = {result.final_value:.5f}")
    if result.n_skipped:
        print(f"skipped {result.n_skipped} degenerate iterations")


if __name__ == "__main__":
    main()
