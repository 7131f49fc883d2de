import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEVICE_BASE_URL = os.getenv("DEVICE_BASE_URL", "http://10.112.171.2")
DEVICE_TIMEOUT_SECONDS = float(os.getenv("DEVICE_TIMEOUT_SECONDS", "10"))

CLASS_NAME = os.getenv("CLASS_NAME", "MCA-II Sigma")

DEBUG = False

AUTO_LOAD = bool(int(os.getenv("AUTO_LOAD", "1")))
STRICT_TOGGLE = bool(int(os.getenv("STRICT_TOGGLE", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "logs/aura_panel.log")
