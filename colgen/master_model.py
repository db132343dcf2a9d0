# colgen/master_model.py

import math

from .backend import GurobiBackend, LPBackend
from .errors import InvalidState
from .pattern import Pattern
from .pricing_model import PricingModel
from .solution import Solution

# pricing objectives at or below this value are treated as zero
REDUCED_COST_THRESHOLD = 1e-14

INITIALIZED = "initialized"
RELAXATION_SOLVED = "relaxation_solved"
COLUMNS_PENDING = "columns_pending"
INTEGER_RESOLVED = "integer_resolved"
CLEANED = "cleaned"


class MasterModel:
    """
    Master problem of the cutting stock problem, solved by column generation.

      min   sum(x_p)
      s.t.  sum(a_sp * x_p) >= demand_s   for every ordered size s
            x_p >= 0

    where p ranges over the known patterns and a_sp is the number of items
    of size s cut by pattern p. The model starts with one trivial pattern
    per size and grows by the patterns proposed by the PricingModel.

    solve_integer() resolves the generated columns as an integer program
    once. This is a heuristic: the LP relaxation gives a lower bound, but
    proving integer optimality needs full branch-and-price.

    Example usage:
      with MasterModel(instance) as master:
          master.solve_integer()
          solution = master.get_solution()
          print(solution.get_stock_needed(), master.get_lower_bound())
    """

    def __init__(self, instance, backend_factory=GurobiBackend, logger=None,
                 threshold=REDUCED_COST_THRESHOLD):
        """
        instance: the Instance to solve
        backend_factory: zero-argument callable creating an LPBackend;
                         called once for the master and once for the pricing model
        logger: optional SolverLogger. It is opened here, closing it is up to the caller.
        threshold: minimum pricing objective for a pattern to be added as a column
        """
        self.instance = instance
        self.threshold = threshold
        self.logger = logger
        self.sizes = instance.get_sizes()

        # columns: parallel lists plus an index from pattern to position
        self.patterns = []
        self.vars = []
        self.pattern_index = {}
        # one demand constraint per size, fixed after construction
        self.constraints = []

        self.iterations = 0
        self.lp_objective = None
        self.lower_bound = None
        self.solution = None

        self.pricing = None
        self.backend = backend_factory()
        try:
            self.pricing = PricingModel(instance, backend_factory)
            self._init_constraints()
            self._init_patterns()
            self._init_objective()
        except BaseException:
            self.clean_up()
            raise
        self.state = INITIALIZED

        if self.logger:
            self.logger.open()
            self.logger.log_event("MasterStart", 0, "",
                                  f"sizes={len(self.sizes)}, capacity={instance.get_capacity()}")

    def _init_constraints(self):
        for size in self.sizes:
            constr = self.backend.add_constraint([], LPBackend.GREATER_EQUAL,
                                                 self.instance.get_amount(size))
            self.constraints.append(constr)

    def _init_patterns(self):
        """One pattern per size, cutting that size as often as it fits the stock."""
        capacity = self.instance.get_capacity()
        for size in self.sizes:
            self._add_column(Pattern({size: capacity // size}), obj=0.0)

    def _init_objective(self):
        self.backend.set_objective([(var, 1.0) for var in self.vars], sense=LPBackend.MINIMIZE)

    def _add_column(self, pattern, obj=1.0):
        column = [(constr, pattern.get_amount(size))
                  for size, constr in zip(self.sizes, self.constraints)
                  if pattern.contains_size(size)]
        var = self.backend.add_variable(lb=0.0, ub=LPBackend.INFINITY, obj=obj, column=column)
        self.pattern_index[pattern] = len(self.patterns)
        self.patterns.append(pattern)
        self.vars.append(var)

    def _check_open(self):
        if self.state == CLEANED:
            raise InvalidState("master model was already cleaned up")

    def add_pattern(self, pattern):
        """
        Add a pattern as a new column: a continuous variable in [0, inf) with
        coefficient 1 in the objective and the pattern's count of each size
        in the demand constraint of that size.
        """
        self._check_open()
        if pattern in self.pattern_index:
            raise InvalidState(f"pattern {pattern.as_list()} was already added to the model")
        self._add_column(pattern)
        self.state = COLUMNS_PENDING
        if self.logger:
            self.logger.log_event("ColumnAdded", self.iterations, self.lp_objective,
                                  f"pattern={pattern.as_list()}, columns={len(self.patterns)}")

    def get_duals(self):
        """Dual price of each demand constraint, keyed by size."""
        self._check_open()
        if self.state != RELAXATION_SOLVED:
            raise InvalidState(f"duals are only available right after an LP solve (state={self.state})")
        return {size: self.backend.get_dual(constr)
                for size, constr in zip(self.sizes, self.constraints)}

    def _solve_lp(self):
        self.state = COLUMNS_PENDING
        self.backend.solve()
        self.lp_objective = self.backend.get_objective_value()
        self.iterations += 1
        self.state = RELAXATION_SOLVED
        if self.logger:
            self.logger.log_event("MasterSolved", self.iterations, self.lp_objective,
                                  f"columns={len(self.patterns)}")

    def _generate_column(self):
        """
        Price out one pattern with the current duals and add it if it improves
        the master. Returns whether a column was added.
        """
        self.pricing.set_duals(self.get_duals())
        self.pricing.solve()
        reduced = self.pricing.get_objective()
        if reduced <= self.threshold:
            return False
        pattern = self.pricing.get_pattern()
        if pattern in self.pattern_index:
            # regenerated a known column, treat as converged
            if self.logger:
                self.logger.log_event("DuplicateColumn", self.iterations, self.lp_objective,
                                      f"pattern={pattern.as_list()}, reduced={reduced}")
            return False
        self.add_pattern(pattern)
        return True

    def solve_relaxation(self):
        """
        Solve the LP relaxation of the master problem by column generation:
        solve the LP, price out a new pattern with its duals, and repeat
        until no improving pattern is found.
        """
        self._check_open()
        self.iterations = 0
        self._solve_lp()
        while self._generate_column():
            self._solve_lp()
        if self.logger:
            self.logger.log_event("Converged", self.iterations, self.lp_objective,
                                  f"columns={len(self.patterns)}")

    def solve_integer(self):
        """
        Run column generation, store the rounded-up LP objective as lower
        bound, then solve the master once with integer variables over all
        generated columns. The variables are continuous again afterwards.
        """
        self._check_open()
        self.lower_bound = None
        self.solution = None
        self.solve_relaxation()
        # the stock count is integral, so the LP bound can be rounded up
        # once the solver's own tolerance is taken off
        tolerance = self.backend.get_optimality_tolerance()
        lower_bound = math.ceil(self.lp_objective - tolerance)

        self.state = COLUMNS_PENDING
        try:
            for var in self.vars:
                self.backend.set_integer(var, True)
            self.backend.solve()
            result = {}
            for pattern, var in zip(self.patterns, self.vars):
                copies = int(round(self.backend.get_value(var)))
                if copies > 0:
                    result[pattern] = copies
        finally:
            if self.state != CLEANED:
                for var in self.vars:
                    self.backend.set_integer(var, False)

        self.lower_bound = lower_bound
        self.solution = Solution(self.instance, result)
        self.state = INTEGER_RESOLVED
        if self.logger:
            self.logger.log_event("IntegerSolved", self.iterations, self.lp_objective,
                                  f"lower_bound={lower_bound}, stock_needed={self.solution.get_stock_needed()}")

    def get_lower_bound(self):
        if self.lower_bound is None:
            raise InvalidState("no lower bound available, call solve_integer() first")
        return self.lower_bound

    def get_solution(self):
        if self.solution is None:
            raise InvalidState("no solution available, call solve_integer() first")
        return self.solution

    def get_gap(self):
        """Stock needed by the integer solution minus the LP lower bound."""
        return self.get_solution().get_stock_needed() - self.get_lower_bound()

    def get_objective(self):
        """Objective of the most recent LP relaxation solve."""
        if self.lp_objective is None:
            raise InvalidState("the LP relaxation has not been solved yet")
        return self.lp_objective

    def get_patterns(self):
        return list(self.patterns)

    def get_iterations(self):
        return self.iterations

    def clean_up(self):
        """Release the solver resources of the master and the pricing model."""
        if getattr(self, "state", None) == CLEANED:
            return
        self.state = CLEANED
        try:
            if self.pricing is not None:
                self.pricing.clean_up()
        finally:
            self.backend.close()
        if self.logger:
            self.logger.log_event("CleanUp", self.iterations,
                                  "" if self.lp_objective is None else self.lp_objective,
                                  f"columns={len(self.patterns)}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.clean_up()
        return False
