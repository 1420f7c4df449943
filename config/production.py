import os

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "1")))

DEFAULT_TARGET_PERCENTAGE = float(os.getenv("DEFAULT_TARGET_PERCENTAGE", "75"))
