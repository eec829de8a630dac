import os

DATA_DIR = os.getenv("MARKME_DATA_DIR", "test_data")

AUTO_SEED_DATA = bool(int(os.getenv("AUTO_SEED_DATA", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_FILE = None

DEBUG = False
TESTING = True
