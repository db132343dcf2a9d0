# colgen/backend.py

import gurobipy as gp
from gurobipy import GRB

from .errors import SolverError, InvalidState


class LPBackend:
    """
    The LP/MIP solver capability used by the master and pricing models.

    Variables and constraints are opaque handles returned by add_variable
    and add_constraint. Coefficient lists are lists of (handle, coefficient)
    pairs. A backend owns native solver resources; release them with close(),
    or use the backend as a context manager.
    """

    MINIMIZE = "min"
    MAXIMIZE = "max"
    LESS_EQUAL = "<="
    GREATER_EQUAL = ">="
    EQUAL = "=="
    INFINITY = float("inf")

    def add_variable(self, lb=0.0, ub=INFINITY, obj=0.0, integer=False, column=None):
        """
        Create a variable with bounds [lb, ub] and objective coefficient obj.
        column: optional list of (constraint, coefficient) pairs, the
                coefficients of the new variable in existing constraints.
        """
        raise NotImplementedError

    def set_integer(self, var, integer):
        """Switch an existing variable between integer and continuous type."""
        raise NotImplementedError

    def add_constraint(self, coeffs, sense, rhs):
        raise NotImplementedError

    def set_objective(self, coeffs, constant=0.0, sense=MINIMIZE):
        """Replace the whole objective by sum(coef * var) + constant."""
        raise NotImplementedError

    def solve(self):
        """Solve to optimality. Raises SolverError if no optimal solution is found."""
        raise NotImplementedError

    def is_feasible(self):
        raise NotImplementedError

    def get_value(self, var):
        raise NotImplementedError

    def get_dual(self, constr):
        raise NotImplementedError

    def get_objective_value(self):
        raise NotImplementedError

    def get_optimality_tolerance(self):
        raise NotImplementedError

    def close(self):
        raise NotImplementedError

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def _linexpr(coeffs):
    expr = gp.LinExpr()
    if coeffs:
        expr.addTerms([coef for _, coef in coeffs], [v for v, _ in coeffs])
    return expr


class GurobiBackend(LPBackend):
    """LPBackend on top of a gurobipy Model."""

    _SENSES = {
        LPBackend.LESS_EQUAL: GRB.LESS_EQUAL,
        LPBackend.GREATER_EQUAL: GRB.GREATER_EQUAL,
        LPBackend.EQUAL: GRB.EQUAL,
    }

    def __init__(self, name=""):
        try:
            self._model = gp.Model(name)
            self._model.Params.OutputFlag = 0  # silent
        except gp.GurobiError as e:
            raise SolverError(f"Gurobi error creating model: {e}") from e
        self._closed = False

    @property
    def model(self):
        self._check_open()
        return self._model

    def _check_open(self):
        if self._closed:
            raise InvalidState("solver backend was already closed")

    def add_variable(self, lb=0.0, ub=LPBackend.INFINITY, obj=0.0, integer=False, column=None):
        self._check_open()
        vtype = GRB.INTEGER if integer else GRB.CONTINUOUS
        try:
            col = None
            if column:
                col = gp.Column([coef for _, coef in column], [c for c, _ in column])
            var = self._model.addVar(lb=lb, ub=ub, obj=obj, vtype=vtype, column=col)
            self._model.update()
            return var
        except gp.GurobiError as e:
            raise SolverError(f"Gurobi error adding variable: {e}") from e

    def set_integer(self, var, integer):
        self._check_open()
        try:
            var.VType = GRB.INTEGER if integer else GRB.CONTINUOUS
        except gp.GurobiError as e:
            raise SolverError(f"Gurobi error changing variable type: {e}") from e

    def add_constraint(self, coeffs, sense, rhs):
        self._check_open()
        if sense not in self._SENSES:
            raise ValueError(f"unknown constraint sense {sense!r}")
        try:
            lhs = _linexpr(coeffs)
            constr = self._model.addLConstr(lhs, self._SENSES[sense], rhs)
            self._model.update()
            return constr
        except gp.GurobiError as e:
            raise SolverError(f"Gurobi error adding constraint: {e}") from e

    def set_objective(self, coeffs, constant=0.0, sense=LPBackend.MINIMIZE):
        self._check_open()
        model_sense = GRB.MAXIMIZE if sense == self.MAXIMIZE else GRB.MINIMIZE
        try:
            expr = _linexpr(coeffs)
            expr.addConstant(constant)
            self._model.setObjective(expr, model_sense)
        except gp.GurobiError as e:
            raise SolverError(f"Gurobi error setting objective: {e}") from e

    def solve(self):
        self._check_open()
        try:
            self._model.optimize()
            status = self._model.Status
        except gp.GurobiError as e:
            raise SolverError(f"Gurobi error during optimize: {e}") from e
        if status != GRB.OPTIMAL:
            raise SolverError(f"Gurobi finished with status {status}, expected OPTIMAL")

    def is_feasible(self):
        self._check_open()
        return self._model.SolCount > 0

    def get_value(self, var):
        self._check_open()
        try:
            return var.X
        except gp.GurobiError as e:
            raise SolverError(f"Gurobi error reading variable value: {e}") from e

    def get_dual(self, constr):
        self._check_open()
        try:
            return constr.Pi
        except gp.GurobiError as e:
            raise SolverError(f"Gurobi error reading dual value: {e}") from e

    def get_objective_value(self):
        self._check_open()
        try:
            return self._model.ObjVal
        except gp.GurobiError as e:
            raise SolverError(f"Gurobi error reading objective value: {e}") from e

    def get_optimality_tolerance(self):
        self._check_open()
        return self._model.Params.OptimalityTol

    def close(self):
        if self._closed:
            return
        self._closed = True
        self._model.dispose()
