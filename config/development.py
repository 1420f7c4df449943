import os

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "0")))

# Target used when a request carries no settings of its own
DEFAULT_TARGET_PERCENTAGE = float(os.getenv("DEFAULT_TARGET_PERCENTAGE", "75"))
