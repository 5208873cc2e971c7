"""
Attendance fixture data

Hard-coded students and attendance records standing in for a database. Every
call rebuilds its data from the literals below, so nothing written through
``add_student`` or ``record_attendance`` is kept.

Student ids are ints while the sample attendance records carry ``studentId``
as strings ('1001', '1002'). The two sets are independent samples.
"""

import math
import re

from .photos import PhotoService

FIXTURE_DATE = '2025-03-19'

# (id, name, time in, time out, gender, grade level, section)
STUDENT_ROWS = [
    (1001, 'Maria Clara Santos', '07:20 AM', '04:25 PM', 'Female', 3, 'A'),
    (1002, 'Jose Andres Reyes', '07:10 AM', '04:35 PM', 'Male', 4, 'B'),
    (1003, 'Rizalina Bautista', '07:25 AM', '04:40 PM', 'Female', 5, 'C'),
    (1004, 'Emilio Aguinaldo Cruz', '07:05 AM', '04:20 PM', 'Male', 6, 'D'),
    (1005, 'Gabriela Silang Rivera', '07:18 AM', '04:45 PM', 'Female', 2, 'E'),
    (1006, 'Diego Silang Mendoza', '07:22 AM', '04:38 PM', 'Male', 3, 'A'),
    (1007, 'Melchora Aquino Pascual', '07:08 AM', '04:28 PM', 'Female', 4, 'B'),
    (1008, 'Andres Bonifacio Torres', '07:12 AM', '04:50 PM', 'Male', 5, 'C'),
    (1009, 'Antonio Luna Gomez', '07:30 AM', '04:15 PM', 'Male', 6, 'D'),
    (1010, 'Juan Dela Cruz', '07:15 AM', '04:30 PM', 'Male', 2, 'E'),
]

PRESENT = 'Present'
LATE = 'Late'
ABSENT = 'Absent'
EXCUSED = 'Excused'
ATTENDANCE_STATUSES = [PRESENT, LATE, ABSENT, EXCUSED]

SUBJECT_ATTENDANCE_SAMPLE = [
    {
        'date': '2023-09-15',
        'studentName': 'Maria Clara Santos',
        'studentId': '1001',
        'status': PRESENT,
        'time': '10:30:45 AM',
        'remarks': '',
    },
    {
        'date': '2023-09-15',
        'studentName': 'Juan Dela Cruz',
        'studentId': '1002',
        'status': LATE,
        'time': '10:45:12 AM',
        'remarks': 'Traffic',
    },
]


LEADING_INT = re.compile(r'\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(\d+))')


def parse_int(value):
    """Leading-integer parse in the manner of JavaScript's parseInt.

    Numbers truncate toward zero, strings keep their leading digits
    ('12px' -> 12, '4.5' -> 4) and anything else gives None, so it
    matches nothing.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return int(value)

    match = LEADING_INT.match(str(value))
    if match is None:
        return None
    sign, hex_digits, digits = match.groups()
    number = int(hex_digits, 16) if hex_digits else int(digits)
    return -number if sign == '-' else number


class AttendanceService:

    def __init__(self, photo_service=None):
        self.photo_service = photo_service or PhotoService()

    def get_data(self):
        photos = self.photo_service.get_data()
        students = []
        for index, (student_id, name, time_in, time_out, gender, grade_level, section) in enumerate(STUDENT_ROWS):
            photo = photos[index] if index < len(photos) else None
            students.append({
                'id': student_id,
                'name': name,
                'date': FIXTURE_DATE,
                'timeIn': time_in,
                'timeOut': time_out,
                'gender': gender,
                'gradeLevel': grade_level,
                'section': section,
                'photo': photo.get('itemImageSrc') if photo else None,
            })
        return students

    def get_students_by_grade(self, grade_level):
        grade_level = parse_int(grade_level)
        return [s for s in self.get_data() if s['gradeLevel'] == grade_level]

    def get_students_by_section(self, section_letter):
        return [s for s in self.get_data() if s['section'] == section_letter]

    def get_students_by_grade_and_section(self, grade_level, section_letter):
        grade_level = parse_int(grade_level)
        return [
            s for s in self.get_data()
            if s['gradeLevel'] == grade_level and s['section'] == section_letter
        ]

    def add_student(self, student):
        # Not stored; returned as given
        return student

    def record_attendance(self, student_id, attendance_record):
        # Not stored; echoed back with the student id attached
        return {'studentId': student_id, **attendance_record}

    def get_attendance_for_subject(self, subject_name=None):
        """Sample records; the same two rows whatever the subject."""
        return [dict(record) for record in SUBJECT_ATTENDANCE_SAMPLE]

    def get_student_by_id(self, student_id):
        student_id = parse_int(student_id)
        for student in self.get_data():
            if student['id'] == student_id:
                return student
        return None
