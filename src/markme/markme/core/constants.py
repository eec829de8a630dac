"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

DATE_KEY_FORMAT = "%Y-%m-%d"
JSON_INDENT = 2

DEFAULT_CLASSES = (
    ("Class 1", ("Alice", "Bob", "Charlie", "Diana")),
    ("Class 2", ("Ethan", "Fiona", "George", "Hannah")),
    ("Class 3", ("Ivy", "Jack", "Karen", "Liam")),
)

DEFAULT_CLASS_TEACHERS = (
    ("Class 1", "Mr. Smith", "Mrs. Johnson", "Introductory physics"),
    ("Class 2", "Ms. Brown", "Mr. White", "Mathematics essentials"),
    ("Class 3", "Dr. Green", "Ms. Blue", "Chemistry basics"),
)
