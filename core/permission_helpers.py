from typing import Optional

from fastapi import Depends, Request

from core.errors import Forbidden, Unauthenticated
from core.logging_config import logger
from core.permissions import ANY_AUTHENTICATED, POLICY
from dependencies.auth import Identity, SessionContext, get_session_context
from models.enums import EntityKind, Operation


# -----------------------------------------------------
# Table lookup
# -----------------------------------------------------
def allowed_roles(kind: EntityKind, operation: Operation) -> frozenset:
    """Allowed set for (kind, operation); contains ANY_AUTHENTICATED when open to everyone."""
    return POLICY[EntityKind(kind)][Operation(operation)]


# -----------------------------------------------------
# Record-level rules
# -----------------------------------------------------
def is_self_deletion(identity: Identity, kind: EntityKind, operation: Operation, target_id) -> bool:
    if kind != EntityKind.user or operation != Operation.delete or target_id is None:
        return False
    try:
        return int(target_id) == identity.id
    except (TypeError, ValueError):
        return False


# -----------------------------------------------------
# Policy evaluation
# -----------------------------------------------------
def authorize(
    identity: Optional[Identity],
    kind: EntityKind,
    operation: Operation,
    target_id: Optional[int] = None,
) -> Identity:
    """
    Gate evaluated before any store access. Pure: no I/O, no mutation.

    Raises Unauthenticated for a missing or inactive identity and Forbidden
    when the role is not in the table or the caller tries to delete their
    own user account.
    """
    if identity is None or not identity.is_active:
        raise Unauthenticated()

    allowed = allowed_roles(kind, operation)

    if ANY_AUTHENTICATED not in allowed and identity.role not in allowed:
        logger.warning(
            f"Denied {operation} on {kind} for user {identity.id} (role {identity.role})"
        )
        raise Forbidden()

    if is_self_deletion(identity, kind, operation, target_id):
        logger.warning(f"Denied self-deletion for user {identity.id}")
        raise Forbidden("You cannot delete your own account")

    return identity


def is_allowed(
    identity: Optional[Identity],
    kind: EntityKind,
    operation: Operation,
    target_id: Optional[int] = None,
) -> bool:
    try:
        authorize(identity, kind, operation, target_id)
    except (Unauthenticated, Forbidden):
        return False
    return True


# -----------------------------------------------------
# FastAPI dependency wrapper
# -----------------------------------------------------
def requires_permission(kind: EntityKind, operation: Operation, target_param: Optional[str] = None):
    """
    Usage:
        @router.delete("/{record_id}")
        def delete(ctx: SessionContext = Depends(
            requires_permission(EntityKind.user, Operation.delete, target_param="record_id")
        )):

    Runs as a dependency, so denial happens before the body is validated.
    """

    def dependency(
        request: Request,
        ctx: SessionContext = Depends(get_session_context),
    ) -> SessionContext:
        target_id = request.path_params.get(target_param) if target_param else None
        authorize(ctx.identity, kind, operation, target_id)
        return ctx

    return dependency
