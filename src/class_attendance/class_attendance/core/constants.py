"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SECTION_NAME_MIN = 2
SECTION_NAME_MAX = 50
SECTION_DESCRIPTION_MAX = 200

STUDENT_NAME_MIN = 2
STUDENT_NAME_MAX = 100
ROLL_NUMBER_MIN = 2
ROLL_NUMBER_MAX = 20
PHONE_MIN = 10
PHONE_MAX = 15

DEMO_STUDENT_COUNT = 20
DAYS_PER_WEEK = 7
