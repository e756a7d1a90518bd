"""
Resource table consumed by ``build_api_router``.

Each entry binds a URL path to the permission resource that gates it, its
model and schemas. Certificates live under ``/certificates`` but are gated
by the ``certifications`` permission used in user grants.
"""
from app.api.v1.crud import ExpandField, ResourceConfig
from app.core.permissions import Resource
from app.models import Batch, Certificate, Course, Employee, Location, Student, Vendor
from app.schemas.batch import BatchCreate, BatchResponse, BatchUpdate
from app.schemas.certificate import CertificateCreate, CertificateResponse, CertificateUpdate
from app.schemas.course import CourseCreate, CourseResponse, CourseUpdate
from app.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from app.schemas.location import LocationCreate, LocationResponse, LocationUpdate
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.schemas.vendor import VendorCreate, VendorResponse, VendorUpdate

COURSE_REF = ExpandField("course", ("id", "title"))

RESOURCES: tuple[ResourceConfig, ...] = (
    ResourceConfig(
        path="students",
        permission=Resource.STUDENTS,
        model=Student,
        create_schema=StudentCreate,
        update_schema=StudentUpdate,
        response_schema=StudentResponse,
        expand_fields=(COURSE_REF, ExpandField("booked_by", ("id", "name"))),
    ),
    ResourceConfig(
        path="courses",
        permission=Resource.COURSES,
        model=Course,
        create_schema=CourseCreate,
        update_schema=CourseUpdate,
        response_schema=CourseResponse,
    ),
    ResourceConfig(
        path="batches",
        permission=Resource.BATCHES,
        model=Batch,
        create_schema=BatchCreate,
        update_schema=BatchUpdate,
        response_schema=BatchResponse,
    ),
    ResourceConfig(
        path="certificates",
        permission=Resource.CERTIFICATIONS,
        model=Certificate,
        create_schema=CertificateCreate,
        update_schema=CertificateUpdate,
        response_schema=CertificateResponse,
        expand_fields=(ExpandField("student", ("id", "name")), COURSE_REF),
    ),
    ResourceConfig(
        path="employees",
        permission=Resource.EMPLOYEES,
        model=Employee,
        create_schema=EmployeeCreate,
        update_schema=EmployeeUpdate,
        response_schema=EmployeeResponse,
    ),
    ResourceConfig(
        path="vendors",
        permission=Resource.VENDORS,
        model=Vendor,
        create_schema=VendorCreate,
        update_schema=VendorUpdate,
        response_schema=VendorResponse,
    ),
    ResourceConfig(
        path="locations",
        permission=Resource.LOCATIONS,
        model=Location,
        create_schema=LocationCreate,
        update_schema=LocationUpdate,
        response_schema=LocationResponse,
    ),
)
