"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_DEVICE_BASE_URL = "http://10.112.171.2"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_CLASS_NAME = "MCA-II Sigma"

TODAY_PATH = "/api/attendance/today"
UPDATE_PATH = "/api/attendance/update"
SUBMIT_PATH = "/api/attendance/submit"

MSG_LOAD_FAILED = "Failed to load attendance from device."
MSG_SAVE_FAILED = "Failed to save changes."
MSG_SUBMIT_FAILED = "Failed to submit."
MSG_SAVED = "Changes saved to device."
MSG_SUBMITTED = "Submitted to Aura."
MSG_SUBMIT_CONFIRM = "Submit to Aura? This will lock it."
