from pathlib import Path

DRIVER_N = 20000
DRIVER_MAX_VALUE = 1_000_000

SAMPLE_SEED = 114514
MAX_SAMPLE_TIME_MS = 3000
MAX_SAMPLES = 20000

STATISTICS_NS = list(range(3, 10)) + list(range(10, 100, 10)) + list(range(100, 1000, 100))
RESULT_DIR = Path("logs/statistics.csv")
