from enum import Enum


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for UI dropdowns.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]


# -----------------------------------------------------
# ACCOUNT ROLE
# -----------------------------------------------------
class Role(BaseStrEnum):
    """Fixed at signup; drives permissions and the landing page."""

    student = "student"
    faculty = "faculty"
    hod = "hod"


# -----------------------------------------------------
# FEE TYPE
# -----------------------------------------------------
class FeeType(BaseStrEnum):
    semester = "semester"
    minor = "minor"


# -----------------------------------------------------
# FEE REQUEST STATUS
# -----------------------------------------------------
class RequestStatus(BaseStrEnum):
    """Workflow state for a fee request."""

    pending = "Pending"
    approved = "Approved"
    rejected = "Rejected"
    paid = "Paid"
