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
# ROLE
# -----------------------------------------------------
class Role(BaseStrEnum):
    """
    Department role of a user. One role per user.
    Director_* is its own role, not an upgrade of the base department.
    """

    DMV = "DMV"
    MPD = "MPD"
    FHP = "FHP"
    FSD = "FSD"
    ICE = "ICE"
    IRS = "IRS"
    DIRECTOR_MPD = "Director_MPD"
    DIRECTOR_FHP = "Director_FHP"
    DIRECTOR_FSD = "Director_FSD"
    IT = "IT"


# -----------------------------------------------------
# ENTITY KIND
# -----------------------------------------------------
class EntityKind(BaseStrEnum):
    """Record types guarded by the policy table."""

    citizen = "citizen"
    vehicle = "vehicle"
    driver_license = "driver_license"
    business = "business"
    property = "property"
    permit = "permit"
    criminal_record = "criminal_record"
    user = "user"


# -----------------------------------------------------
# OPERATION
# -----------------------------------------------------
class Operation(BaseStrEnum):
    list_all = "list_all"
    get = "get"
    search = "search"
    create = "create"
    update = "update"
    delete = "delete"


# -----------------------------------------------------
# IMMIGRATION STATUS
# -----------------------------------------------------
class ImmigrationStatus(BaseStrEnum):
    citizen = "citizen"
    immigrant = "immigrant"
    tourist = "tourist"


# -----------------------------------------------------
# CRIMINAL RECORD STATUS
# -----------------------------------------------------
class CriminalRecordStatus(BaseStrEnum):
    """Case state for a criminal record."""

    active = "active"
    resolved = "resolved"
    warrant = "warrant"
