# colgen/logger.py

import csv
import time


class SolverLogger:
    """
    Logs column generation events (master solves, added columns, integer
    resolve) to CSV. Also handles timing.

    Example usage:
      logger = SolverLogger("colgen_log.csv")
      with MasterModel(instance, logger=logger) as master:
          master.solve_integer()
    """
    HEADER = ["timestamp", "event", "iteration", "lp_obj", "details"]

    def __init__(self, log_file="solver_log.csv"):
        self.log_file = log_file
        self.file_handle = None
        self.csv_writer = None
        self.start_time = time.time()

    def open(self):
        if self.file_handle:
            return
        self.file_handle = open(self.log_file, "w", newline="")
        self.csv_writer = csv.writer(self.file_handle)
        self.csv_writer.writerow(self.HEADER)

    def close(self):
        if self.file_handle:
            self.file_handle.close()
        self.file_handle = None
        self.csv_writer = None

    def log_event(self, event, iteration, lp_obj, details=""):
        if not self.csv_writer:
            return
        t = time.time() - self.start_time
        self.csv_writer.writerow([f"{t:.2f}", event, iteration, lp_obj, details])
        self.file_handle.flush()

    def __del__(self):
        self.close()
