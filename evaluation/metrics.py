# evaluation/metrics.py

import csv
import statistics


def summarize_csv_performance(csv_file):
    """
    Reads the CSV written by evaluate_instances and computes average time,
    gap and number of columns over the solved instances.
    """
    solved = []
    errors = 0
    with open(csv_file, "r") as f:
        reader = csv.DictReader(f)
        for row in reader:
            if row["status"] != "ok":
                errors += 1
                continue
            row["time"] = float(row["time"])
            row["lower_bound"] = int(row["lower_bound"])
            row["stock_needed"] = int(row["stock_needed"])
            row["gap"] = int(row["gap"])
            row["columns"] = int(row["columns"])
            solved.append(row)

    results = {"instances": len(solved) + errors, "errors": errors}
    if not solved:
        return results
    results.update({
        "avg_time": statistics.mean(r["time"] for r in solved),
        "avg_gap": statistics.mean(r["gap"] for r in solved),
        "max_gap": max(r["gap"] for r in solved),
        "avg_columns": statistics.mean(r["columns"] for r in solved),
        "optimal": sum(1 for r in solved if r["gap"] == 0),
        # the LP bound should never exceed the integer solution
        "bound_violations": sum(1 for r in solved if r["lower_bound"] > r["stock_needed"]),
    })
    return results
