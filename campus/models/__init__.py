from .timestampedmodel import TimeStampedModel
from .basemodel import BaseModel
from .school import School, Domain
from .organisation import Organisation
from .user import User
from .schooladmin import SchoolAdmin
from .organisationadmin import OrganisationAdmin
from .course import Course
from .faculty import Faculty
from .calendar import Calendar
from .cohort import Cohort
from .facultycohortenrollment import FacultyCohortEnrollment
from .calendarcohort import CalendarCohort
from .team import Team
from .founder import Founder
from .connectslot import ConnectSlot
from .dbconfig import DbConfig

__all__ = [
    'School',
    'Domain',
    'Organisation',
    'User',
    'SchoolAdmin',
    'OrganisationAdmin',
    'Course',
    'Faculty',
    'Calendar',
    'Cohort',
    'FacultyCohortEnrollment',
    'CalendarCohort',
    'Team',
    'Founder',
    'ConnectSlot',
    'DbConfig',
]
