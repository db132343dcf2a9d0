# scripts/run_solver.py

import pickle

from colgen.instance import Instance
from colgen.logger import SolverLogger
from colgen.master_model import MasterModel


def main():
    # load single instance, or fall back to a random one
    try:
        with open("single_instance.pkl", "rb") as f:
            inst = pickle.load(f)
    except FileNotFoundError:
        inst = Instance.random_instance(seed=54321, orders=50, max_step=13, max_amount=20)
    print(f"Instance: {inst}")

    logger = SolverLogger("colgen_log.csv")
    try:
        with MasterModel(inst, logger=logger) as master:
            master.solve_integer()
            sol = master.get_solution()
            lb = master.get_lower_bound()
    finally:
        logger.close()

    print(f"Integer solution = {sol.get_stock_needed()}")
    print(f"Lower bound = {lb}")
    if lb > sol.get_stock_needed():
        print("Lower bound exceeds the integer solution, check solver tolerances")
    print("Solution usage:")
    for pattern in sol.get_patterns():
        print(f"copies={sol.get_copies(pattern)}, pattern={pattern.as_list()}, "
              f"waste={inst.get_capacity() - pattern.get_size()}")


if __name__=="__main__":
    main()
