from models.enums import EntityKind, Operation, Role

# Wildcard: any authenticated, active identity regardless of role
ANY_AUTHENTICATED = "*"

ANY = frozenset({ANY_AUTHENTICATED})
NOBODY = frozenset()

DIRECTORS = frozenset({Role.DIRECTOR_MPD, Role.DIRECTOR_FHP, Role.DIRECTOR_FSD})
LAW_ENFORCEMENT = frozenset({Role.MPD, Role.FHP, Role.FSD, Role.ICE})


def _crud(create, update, delete, read) -> dict:
    """Expand one table row; Get, ListAll and Search share the read set."""
    return {
        Operation.create: frozenset(create),
        Operation.update: frozenset(update),
        Operation.delete: frozenset(delete),
        Operation.list_all: frozenset(read),
        Operation.get: frozenset(read),
        Operation.search: frozenset(read),
    }


# ============================================
# CENTRALIZED (ENTITY, OPERATION) → ROLES MAP
# ============================================
POLICY = {

    # =====================================================
    # CITIZENS: anyone may read and update (flags, notes)
    # =====================================================
    EntityKind.citizen: _crud(
        create={Role.DMV, Role.IT},
        update=ANY,
        delete={Role.IT},
        read=ANY,
    ),

    # =====================================================
    # VEHICLES
    # =====================================================
    EntityKind.vehicle: _crud(
        create={Role.DMV, Role.IT},
        update={Role.DMV, Role.IT},
        delete={Role.IT},
        read=ANY,
    ),

    # =====================================================
    # BUSINESSES: IRS registry
    # =====================================================
    EntityKind.business: _crud(
        create={Role.IRS, Role.IT},
        update={Role.IRS, Role.IT},
        delete=NOBODY,
        read={Role.IRS, Role.IT},
    ),

    # =====================================================
    # PROPERTIES: IRS registry
    # =====================================================
    EntityKind.property: _crud(
        create={Role.IRS, Role.IT},
        update={Role.IRS, Role.IT},
        delete=NOBODY,
        read={Role.IRS, Role.IT},
    ),

    # =====================================================
    # PERMITS
    # =====================================================
    EntityKind.permit: _crud(
        create={Role.DMV, Role.IT},
        update={Role.DMV, Role.IT},
        delete=NOBODY,
        read={Role.DMV, Role.IT},
    ),

    # =====================================================
    # CRIMINAL RECORDS: law enforcement only
    # =====================================================
    EntityKind.criminal_record: _crud(
        create=LAW_ENFORCEMENT | {Role.IT},
        update=LAW_ENFORCEMENT | {Role.IT},
        delete=NOBODY,
        read=LAW_ENFORCEMENT | {Role.IT},
    ),

    # =====================================================
    # USERS: IT and Directors manage accounts,
    # only IT deletes (never its own account)
    # =====================================================
    EntityKind.user: _crud(
        create=DIRECTORS | {Role.IT},
        update=DIRECTORS | {Role.IT},
        delete={Role.IT},
        read=DIRECTORS | {Role.IT},
    ),

    # =====================================================
    # DRIVER LICENSES: DMV issues, road units read
    # =====================================================
    EntityKind.driver_license: _crud(
        create={Role.DMV, Role.IT},
        update={Role.DMV, Role.IT},
        delete=NOBODY,
        read={Role.DMV, Role.MPD, Role.FHP, Role.FSD, Role.IT},
    ),
}
