from ._errors import DegenerateFitnessError  # NOQA
from ._errors import InvalidParameterError  # NOQA
from ._es import SimpleES  # NOQA
from ._es import es_gradient  # NOQA
from ._es import es_step  # NOQA
from ._es import normalize_fitness  # NOQA
from ._objectives import GLOBAL_OPTIMA  # NOQA
from ._objectives import OBJECTIVES  # NOQA
from ._objectives import get_objective  # NOQA
from ._objectives import himmelblau  # NOQA
from ._objectives import rastrigin  # NOQA
from ._objectives import sphere  # NOQA
from ._objectives import styblinski_tang  # NOQA
from ._driver import OptimizeResult  # NOQA
from ._driver import optimize  # NOQA
from .version import __version__  # NOQA
