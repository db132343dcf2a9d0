# colgen/pricing_model.py

from .backend import GurobiBackend, LPBackend
from .errors import InvalidState
from .pattern import Pattern


class PricingModel:
    """
    The pricing subproblem of the cutting stock problem: an unbounded
    knapsack whose item profits are the dual prices of the master's demand
    constraints and whose capacity is the stock capacity.

      max   sum(duals[s] * x_s) - 1
      s.t.  sum(s * x_s) <= capacity
            x_s >= 0 integer

    A positive optimum means the pattern x has a negative reduced cost in
    the (minimizing) master problem.
    """

    def __init__(self, instance, backend_factory=GurobiBackend):
        self.instance = instance
        self.backend = backend_factory()
        self.sizes = instance.get_sizes()
        self.vars = []
        self.solved = False
        try:
            self._init_vars()
            self._init_capacity_constraint()
            self.set_duals({})
        except BaseException:
            self.clean_up()
            raise

    def _init_vars(self):
        capacity = self.instance.get_capacity()
        for size in self.sizes:
            # no more copies of a size than fit the stock
            self.vars.append(self.backend.add_variable(lb=0, ub=capacity // size, integer=True))

    def _init_capacity_constraint(self):
        coeffs = list(zip(self.vars, self.sizes))
        self.backend.add_constraint(coeffs, LPBackend.LESS_EQUAL, self.instance.get_capacity())

    def _check_open(self):
        if self.backend is None:
            raise InvalidState("pricing model was already cleaned up")

    def set_duals(self, duals):
        """
        Rebuild the objective from a map size -> dual price. Sizes missing
        from the map get a dual of 0.
        """
        self._check_open()
        coeffs = [(var, float(duals.get(size, 0.0))) for size, var in zip(self.sizes, self.vars)]
        self.backend.set_objective(coeffs, constant=-1.0, sense=LPBackend.MAXIMIZE)
        self.solved = False

    def solve(self):
        self._check_open()
        self.solved = False
        self.backend.solve()
        self.solved = True

    def get_objective(self):
        """Optimal value of the last solve, i.e. the reduced cost improvement."""
        self._check_solved()
        return self.backend.get_objective_value()

    def get_pattern(self):
        """The pattern found by the last solve, counts rounded to absorb solver noise."""
        self._check_solved()
        cuts = {}
        for size, var in zip(self.sizes, self.vars):
            cuts[size] = int(round(self.backend.get_value(var)))
        return Pattern(cuts)

    def _check_solved(self):
        self._check_open()
        if not self.solved:
            raise InvalidState("pricing problem has not been solved for the current duals")

    def clean_up(self):
        if self.backend is None:
            return
        backend, self.backend = self.backend, None
        backend.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.clean_up()
        return False
