"""Example: use the store directly (no UI layer)."""

from datetime import date

from src.markme.markme.attendance.model import StudentAttendanceEntry
from src.markme.markme.core.enums import AttendanceStatus
from src.markme.markme.main import create_store


def main():
    store = create_store()
    class_name = store.list_class_names()[0]

    entries = store.get_attendance(date.today(), class_name)
    marked = [StudentAttendanceEntry(e.name, AttendanceStatus.PRESENT.value) for e in entries]
    store.save_attendance(date.today(), class_name, marked)

    print(store.get_teacher_info(class_name))
    for entry in store.get_attendance(date.today(), class_name):
        print(f"{entry.name}: {entry.status}")


if __name__ == "__main__":
    main()
