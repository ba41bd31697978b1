"""
Usage:
  es_visualizer.py OPTIONS

Optional arguments:
  -h, --help            show this help message and exit
  --function {sphere,himmelblau,styblinski-tang,rastrigin}
  --seed SEED
  --frames FRAMES
  --interval INTERVAL
  --steps-per-frame STEPS_PER_FRAME
  --npop NPOP
  --sigma SIGMA
  --alpha ALPHA

Example:
  python3 tools/es_visualizer.py --function himmelblau --steps-per-frame 5

  python3 tools/es_visualizer.py --function rastrigin \
    --sigma 0.3 --alpha 0.05 --frames 300 --interval 10
"""
import argparse

import numpy as np
from scipy import stats

from matplotlib.colors import LinearSegmentedColormap
import matplotlib.pyplot as plt
import matplotlib.animation as animation
from pylab import rcParams

from simplees import GLOBAL_OPTIMA
from simplees import get_objective
from simplees import es_step

parser = argparse.ArgumentParser()
parser.add_argument(
    "--function",
    choices=["sphere", "himmelblau", "styblinski-tang", "rastrigin"],
    default="himmelblau",
)
parser.add_argument("--seed", type=int, default=1)
parser.add_argument("--frames", type=int, default=100)
parser.add_argument("--interval", type=int, default=20)
parser.add_argument("--steps-per-frame", type=int, default=1)
parser.add_argument("--npop", type=int, default=50)
parser.add_argument("--sigma", type=float, default=0.1)
parser.add_argument("--alpha", type=float, default=0.01)
args = parser.parse_args()

rcParams["figure.figsize"] = 10, 5
fig, (ax1, ax2) = plt.subplots(1, 2)

color_dict = {
    "red": ((0.0, 0.0, 0.0), (1.0, 1.0, 1.0)),
    "green": ((0.0, 0.0, 0.0), (1.0, 1.0, 1.0)),
    "blue": ((0.0, 1.0, 1.0), (1.0, 1.0, 1.0)),
    "yellow": ((1.0, 1.0, 1.0), (1.0, 1.0, 1.0)),
}
bw = LinearSegmentedColormap("BlueWhile", color_dict)

# input domain
lower_bound, upper_bound = -5, 5
objective = get_objective(args.function)
global_optima = GLOBAL_OPTIMA[args.function]

rng = np.random.default_rng(args.seed)
x = rng.standard_normal(2)
estimates = [x]
last_population = None


def contour_function(x1, x2):
    values = np.vectorize(lambda a, b: objective(np.array([a, b])))(x1, x2)
    # Shift to non-negative costs for the log scale.
    cost = -values
    return np.log(cost - cost.min() + 1)


def record(population, fitness, x_new):
    global last_population
    last_population = population
    estimates.append(x_new)


def init():
    for ax in (ax1, ax2):
        ax.set_xlim(lower_bound, upper_bound)
        ax.set_ylim(lower_bound, upper_bound)
        for m in global_optima:
            ax.plot(m[0], m[1], "y*", ms=10)

    x1 = np.arange(lower_bound, upper_bound, 0.05)
    x2 = np.arange(lower_bound, upper_bound, 0.05)
    x1, x2 = np.meshgrid(x1, x2)
    ax1.contour(x1, x2, contour_function(x1, x2), 30, cmap=bw)


def update(frame):
    global x
    for _ in range(args.steps_per_frame):
        x = es_step(
            x,
            objective,
            npop=args.npop,
            sigma=args.sigma,
            alpha=args.alpha,
            rng=rng,
            callback=record,
        )

    # Plot sampled population and the trail of estimates
    ax1.plot(last_population[:, 0], last_population[:, 1], "o", c="r", alpha=0.2)
    trail = np.array(estimates)
    ax1.plot(trail[:, 0], trail[:, 1], "-", c="k", lw=1)

    fig.suptitle(
        f"ES {args.function} iteration={len(estimates) - 1} f(x)={objective(x):.4f}"
    )

    # Plot sampling distribution around the current estimate
    ax2.clear()
    ax2.set_xlim(lower_bound, upper_bound)
    ax2.set_ylim(lower_bound, upper_bound)
    gx, gy = np.mgrid[lower_bound:upper_bound:0.02, lower_bound:upper_bound:0.02]
    rv = stats.multivariate_normal(x, (args.sigma**2) * np.eye(2))
    ax2.contourf(gx, gy, rv.pdf(np.dstack((gx, gy))))

    if frame % 50 == 0:
        print(f"Processing frame {frame}")


def main():
    ani = animation.FuncAnimation(
        fig,
        update,
        frames=args.frames,
        init_func=init,
        blit=False,
        interval=args.interval,
    )
    ani.save(f"./tmp/{args.function}.mp4")


if __name__ == "__main__":
    main()
