import os

# Directory holding classes.json, class_teachers.json and the two attendance indices
DATA_DIR = os.getenv("MARKME_DATA_DIR", "data")

# Seed the three default classes and their teachers when the files are missing
AUTO_SEED_DATA = bool(int(os.getenv("AUTO_SEED_DATA", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FILE = os.getenv("LOG_FILE")

DEBUG = True
