import sys
import os

# Ensure tracer can be imported if this config is used standalone or imported from elsewhere
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tracer.config import StorageMode


class BenchmarkConfig:
    # --- Experiment Settings ---
    DENSITIES = [0.10, 0.20, 0.30]   # Obstacle densities to test
    NUM_TRIALS = 10                  # Number of boards per density
    RANDOM_SEED_BASE = 1000          # Base seed for reproducibility

    # --- Output Paths ---
    _BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    _PROJECT_DIR = os.path.dirname(_BASE_DIR)
    LOG_DIR = os.path.join(_PROJECT_DIR, "logs", "benchmark_storage")

    # --- Board Parameters ---
    # 穷举搜索的状态数随面积指数增长，板子不宜过大
    ROWS = 5
    COLS = 5
    START = (0, 0)
    END = (4, 4)

    # --- Board Generation ---
    EXTRA_CORRIDORS = 1

    # --- Storage Modes ---
    MODES = [StorageMode.STACK, StorageMode.QUEUE]
