import numpy as np
from simplees import SimpleES


def sphere(x1, x2):
    return -((x1 - 3.5) ** 2 + (x2 + 0.2) ** 2)


def main():
    optimizer = SimpleES(mean=np.zeros(2), sigma=0.1, alpha=0.05, seed=3)
    print(" g    f(x1,x2)     x1      x2  ")
    print("===  ==========  ======  ======")

    for _ in range(300):
        solutions = []
        for _ in range(optimizer.population_size):
            x = optimizer.ask()
            value = sphere(x[0], x[1])
            solutions.append((x, value))
        optimizer.tell(solutions)

        if optimizer.generation % 20 == 0:
            mean = optimizer.mean
            msg = "{g:3d}  {value:10.5f}  {x1:6.2f}  {x2:6.2f}".format(
                g=optimizer.generation,
                value=sphere(mean[0], mean[1]),
                x1=mean[0],
                x2=mean[1],
            )
            print(msg)


if __name__ == "__main__":
    main()
