from app.models.batch import Batch
from app.models.certificate import Certificate
from app.models.course import Course
from app.models.employee import Employee
from app.models.location import Location
from app.models.student import Student
from app.models.user import User
from app.models.vendor import Vendor

__all__ = [
    "Batch", "Certificate", "Course", "Employee", "Location", "Student", "User", "Vendor",
]
