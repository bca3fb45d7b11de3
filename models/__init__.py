# -------------------------
# Enums
# -------------------------
from .enums import (
    Role,
    EntityKind,
    Operation,
    ImmigrationStatus,
    CriminalRecordStatus,
)

# -------------------------
# User Models
# -------------------------
from .user import (
    User,
    UserCreate,
    UserRead,
    UserUpdate,
)

# -------------------------
# Citizen Models
# -------------------------
from .citizen import (
    Citizen,
    CitizenCreate,
    CitizenRead,
    CitizenUpdate,
)

# -------------------------
# Vehicle Models
# -------------------------
from .vehicle import (
    Vehicle,
    VehicleCreate,
    VehicleRead,
    VehicleUpdate,
)

# -------------------------
# Driver License Models
# -------------------------
from .driver_license import (
    DriverLicense,
    DriverLicenseCreate,
    DriverLicenseRead,
    DriverLicenseUpdate,
)

# -------------------------
# Business Models
# -------------------------
from .business import (
    Business,
    BusinessCreate,
    BusinessRead,
    BusinessUpdate,
)

# -------------------------
# Property Models
# -------------------------
from .property import (
    Property,
    PropertyCreate,
    PropertyRead,
    PropertyUpdate,
)

# -------------------------
# Permit Models
# -------------------------
from .permit import (
    Permit,
    PermitCreate,
    PermitRead,
    PermitUpdate,
)

# -------------------------
# Criminal Record Models
# -------------------------
from .criminal_record import (
    CriminalRecord,
    CriminalRecordCreate,
    CriminalRecordRead,
    CriminalRecordUpdate,
)

# -------------------------
# Auth Models
# -------------------------
from .session import AuthSession
from .auth import LoginRequest, TokenResponse, RegisterRequest

__all__ = [
    # enums
    "Role",
    "EntityKind",
    "Operation",
    "ImmigrationStatus",
    "CriminalRecordStatus",

    # users
    "User",
    "UserCreate",
    "UserRead",
    "UserUpdate",

    # citizens
    "Citizen",
    "CitizenCreate",
    "CitizenRead",
    "CitizenUpdate",

    # vehicles
    "Vehicle",
    "VehicleCreate",
    "VehicleRead",
    "VehicleUpdate",

    # driver licenses
    "DriverLicense",
    "DriverLicenseCreate",
    "DriverLicenseRead",
    "DriverLicenseUpdate",

    # businesses
    "Business",
    "BusinessCreate",
    "BusinessRead",
    "BusinessUpdate",

    # properties
    "Property",
    "PropertyCreate",
    "PropertyRead",
    "PropertyUpdate",

    # permits
    "Permit",
    "PermitCreate",
    "PermitRead",
    "PermitUpdate",

    # criminal records
    "CriminalRecord",
    "CriminalRecordCreate",
    "CriminalRecordRead",
    "CriminalRecordUpdate",

    # auth
    "AuthSession",
    "LoginRequest",
    "TokenResponse",
    "RegisterRequest",
]
