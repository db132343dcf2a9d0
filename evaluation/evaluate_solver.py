# evaluation/evaluate_solver.py

import csv
import time

from colgen.backend import GurobiBackend
from colgen.errors import ColgenError
from colgen.master_model import MasterModel

FIELDNAMES = ["instance_id", "status", "sizes", "capacity", "lower_bound",
              "stock_needed", "gap", "columns", "iterations", "time", "details"]


def evaluate_instance(instance, backend_factory=GurobiBackend, logger=None):
    """
    Solve one instance with its own MasterModel, released on every exit path.
    Returns a result dict (without instance_id).
    """
    start_t = time.time()
    with MasterModel(instance, backend_factory=backend_factory, logger=logger) as master:
        master.solve_integer()
        solution = master.get_solution()
        lower_bound = master.get_lower_bound()
        result = {
            "status": "ok",
            "sizes": len(instance.get_sizes()),
            "capacity": instance.get_capacity(),
            "lower_bound": lower_bound,
            "stock_needed": solution.get_stock_needed(),
            "gap": solution.get_stock_needed() - lower_bound,
            "columns": len(master.get_patterns()),
            "iterations": master.get_iterations(),
            "details": "",
        }
    result["time"] = time.time() - start_t
    return result


def evaluate_instances(instances, output_csv="colgen_results.csv",
                       backend_factory=GurobiBackend, logger=None):
    """
    instances: list of Instance objects
    output_csv: path to store results, or None to skip writing
    A failing instance is recorded with status "error" and does not stop the batch.
    """
    results = []
    for idx, inst in enumerate(instances):
        start_t = time.time()
        try:
            row = evaluate_instance(inst, backend_factory=backend_factory, logger=logger)
        except ColgenError as e:
            row = {
                "status": "error",
                "sizes": len(inst.get_sizes()),
                "capacity": inst.get_capacity(),
                "lower_bound": "",
                "stock_needed": "",
                "gap": "",
                "columns": "",
                "iterations": "",
                "time": time.time() - start_t,
                "details": f"{type(e).__name__}: {e}",
            }
        row["instance_id"] = idx
        results.append(row)

    if output_csv:
        with open(output_csv, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
            writer.writeheader()
            for r in results:
                writer.writerow(r)
    return results
