# scripts/evaluate_batch.py

import pickle
import time

from evaluation.evaluate_solver import evaluate_instances
from evaluation.metrics import summarize_csv_performance


def main():
    # load test instances
    with open("test_instances.pkl","rb") as f:
        instances = pickle.load(f)

    start_t = time.time()
    results = evaluate_instances(instances, output_csv="colgen_results.csv")
    print(f"Solved {len(results)} instances in {(time.time() - start_t)*1000:.0f}ms")

    summary = summarize_csv_performance("colgen_results.csv")
    for key, value in summary.items():
        print(f"{key}: {value}")
    if summary.get("bound_violations"):
        print("Some lower bounds exceed the integer solution, see colgen_results.csv")

if __name__=="__main__":
    main()
