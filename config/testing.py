import os

SECRET_KEY = "test-secret"

DEVICE_BASE_URL = os.getenv("DEVICE_BASE_URL", "http://device.test")
DEVICE_TIMEOUT_SECONDS = 2.0

CLASS_NAME = "Test Class"

DEBUG = False
TESTING = True

AUTO_LOAD = False
STRICT_TOGGLE = False

LOG_LEVEL = "WARNING"
LOG_FILE = None
