import os

DATA_DIR = os.getenv("MARKME_DATA_DIR", "/var/lib/markme")

AUTO_SEED_DATA = bool(int(os.getenv("AUTO_SEED_DATA", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE")

DEBUG = False
