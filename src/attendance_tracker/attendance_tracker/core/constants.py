"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

ATTENDANCE_BOX = "attendance_box"
SETTINGS_BOX = "settings_box"
LEAVE_BOX = "leave_box"
LEAVE_TYPE_BOX = "leave_type_box"

ALL_BOXES = (ATTENDANCE_BOX, SETTINGS_BOX, LEAVE_BOX, LEAVE_TYPE_BOX)

DB_VERSION_KEY = "db_version"
CURRENT_DB_VERSION = 2

DEFAULT_STORE_PATH = "attendance_store.db"
