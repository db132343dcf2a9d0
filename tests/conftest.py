# tests/conftest.py

import pytest

from colgen.backend import LPBackend
from colgen.errors import SolverError
from colgen.instance import Instance


class ScriptedBackend(LPBackend):
    """
    In-memory LPBackend whose results are set by the test.
    Variables and constraints are plain integer handles.
    """

    def __init__(self):
        self.vars = []
        self.constraints = []
        self.objective = None
        self.values = {}
        self.duals = {}
        self.objective_value = 0.0
        self.fail_on_solve = None  # 1-based solve count that raises
        self.solves = 0
        self.integer_snapshots = []
        self.closed = False

    def add_variable(self, lb=0.0, ub=LPBackend.INFINITY, obj=0.0, integer=False, column=None):
        self.vars.append({"lb": lb, "ub": ub, "obj": obj, "integer": integer,
                          "column": list(column or [])})
        return len(self.vars) - 1

    def set_integer(self, var, integer):
        self.vars[var]["integer"] = integer

    def add_constraint(self, coeffs, sense, rhs):
        self.constraints.append((list(coeffs), sense, rhs))
        return len(self.constraints) - 1

    def set_objective(self, coeffs, constant=0.0, sense=LPBackend.MINIMIZE):
        self.objective = (list(coeffs), constant, sense)

    def solve(self):
        self.solves += 1
        self.integer_snapshots.append([v["integer"] for v in self.vars])
        if self.fail_on_solve is not None and self.solves >= self.fail_on_solve:
            raise SolverError("scripted failure")

    def is_feasible(self):
        return self.solves > 0

    def get_value(self, var):
        return self.values.get(var, 0.0)

    def get_dual(self, constr):
        return self.duals.get(constr, 0.0)

    def get_objective_value(self):
        return self.objective_value

    def get_optimality_tolerance(self):
        return 1e-6

    def close(self):
        self.closed = True


class ScriptedFactory:
    """Backend factory remembering what it created: [master, pricing] for a MasterModel."""

    def __init__(self):
        self.created = []

    def __call__(self):
        backend = ScriptedBackend()
        self.created.append(backend)
        return backend


@pytest.fixture
def scripted_factory():
    return ScriptedFactory()


@pytest.fixture
def instance_a():
    # 3+3+4 fits a single stock of 10
    return Instance({3: 2, 4: 1}, capacity=10)


@pytest.fixture
def instance_b():
    return Instance({}, capacity=10)


@pytest.fixture
def instance_c():
    # 3+4 does not fit a stock of 5
    return Instance({3: 1, 4: 1}, capacity=5)
