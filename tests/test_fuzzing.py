import hypothesis.extra.numpy as npst
import numpy as np
import unittest
from hypothesis import given, strategies as st

from simplees import DegenerateFitnessError
from simplees import InvalidParameterError
from simplees import SimpleES
from simplees import es_step
from simplees import sphere


class TestFuzzing(unittest.TestCase):
    @given(
        data=st.data(),
    )
    def test_es_step(self, data):
        dim = data.draw(st.integers(min_value=1, max_value=20))
        x = data.draw(
            npst.arrays(
                dtype=float,
                shape=dim,
                elements=st.floats(min_value=-1e3, max_value=1e3),
            )
        )
        npop = data.draw(st.integers(min_value=2, max_value=50))
        sigma = data.draw(st.floats(min_value=1e-3, max_value=1e3))
        alpha = data.draw(st.floats(min_value=0, max_value=10))
        seed = data.draw(st.integers(min_value=0, max_value=2**32 - 1))

        try:
            rng = np.random.default_rng(seed)
            x_new = es_step(x, sphere, npop, sigma, alpha, rng=rng)
        except DegenerateFitnessError:
            return
        self.assertEqual(x_new.shape, x.shape)
        self.assertTrue(np.all(np.isfinite(x_new)))

    @given(
        data=st.data(),
    )
    def test_simple_es_tell(self, data):
        dim = data.draw(st.integers(min_value=1, max_value=100))
        mean = data.draw(npst.arrays(dtype=float, shape=dim))
        sigma = data.draw(st.floats(min_value=1e-16))
        n_iterations = data.draw(st.integers(min_value=1, max_value=5))
        try:
            optimizer = SimpleES(mean, sigma, alpha=0.1)
        except InvalidParameterError:
            return
        popsize = optimizer.population_size
        for _ in range(n_iterations):
            tell_solutions = data.draw(
                st.lists(
                    st.tuples(npst.arrays(dtype=float, shape=dim), st.floats()),
                    min_size=popsize,
                    max_size=popsize,
                )
            )
            optimizer.ask()
            try:
                optimizer.tell(tell_solutions)
            except (InvalidParameterError, DegenerateFitnessError):
                return
            self.assertTrue(np.all(np.isfinite(optimizer.mean)))
            optimizer.ask()
