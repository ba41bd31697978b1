from concurrent.futures import ThreadPoolExecutor

import numpy as np
from simplees import es_step, rastrigin


def main():
    rng = np.random.default_rng(1)
    x = np.zeros(5) + 0.4
    print(f"initial x: {x}  f(x) = {rastrigin(x):.5f}")
    with ThreadPoolExecutor(max_workers=4) as executor:
        for _ in range(200):
            x = es_step(
                x,
                rastrigin,
                npop=100,
                sigma=0.1,
                alpha=0.05,
                rng=rng,
                executor=executor,
            )
    print(f"final x:   {x}  f(x) = {rastrigin(x):.5f}")


if __name__ == "__main__":
    main()
