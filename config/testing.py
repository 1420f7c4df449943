DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
LOG_JSON = False

DEFAULT_TARGET_PERCENTAGE = 75.0
