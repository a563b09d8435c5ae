"""Role promotion triggered by booking approval."""

import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.promotion import promotion_target
from app.models.user import User
from app.schemas.booking import PromotionOutcome

logger = logging.getLogger(__name__)


class PromotionService:
    """Apply the promotion rule to the user behind a booking contact.

    Writes go through the caller's session and are committed together with
    the booking status change.
    """

    async def maybe_promote(self, db: AsyncSession, contact: str) -> PromotionOutcome:
        """Promote the user with ``contact`` if their role is eligible.

        A missing user is a valid no-op, not an error. The role is compared
        before it is set, so repeating the call never changes the outcome.

        Args:
            db: Database session
            contact: Requester contact (email) stored on the booking

        Returns:
            What happened to the user's role
        """
        result = await db.execute(select(User).where(User.email == contact))
        user = result.scalar_one_or_none()
        if user is None:
            logger.info(f"No user for contact {contact}; promotion skipped")
            return PromotionOutcome(contact=contact, promoted=False, reason="user_not_found")

        target = promotion_target(user.role)
        if target is None:
            return PromotionOutcome(
                contact=contact,
                promoted=False,
                previous_role=user.role,
                role=user.role,
                reason="role_not_eligible",
            )

        previous_role = user.role
        update_result = await db.execute(
            update(User)
            .where(User.id == user.id, User.role == previous_role)
            .values(role=target)
            .execution_options(synchronize_session="evaluate")
        )
        if update_result.rowcount == 0:
            # Role changed underneath us; report what is stored now.
            await db.refresh(user)
            return PromotionOutcome(
                contact=contact,
                promoted=False,
                previous_role=previous_role,
                role=user.role,
                reason="role_not_eligible",
            )

        logger.info(f"Promoted {contact}: {previous_role} → {target}")
        return PromotionOutcome(
            contact=contact,
            promoted=True,
            previous_role=previous_role,
            role=target,
        )


promotion_service = PromotionService()
