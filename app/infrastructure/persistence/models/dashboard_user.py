"""Dashboard user ORM model (admin console accounts)."""

from sqlalchemy import Boolean, Integer, String, UniqueConstraint, text, true
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import IdentifiedModel

USER_NAME_CONSTRAINT = "uq_dashboard_user_user_name"


class DashboardUser(IdentifiedModel, Base):
    """Dashboard user. Table: dashboard_user. user_name is unique.

    password is opaque to this service: stored and returned as submitted.
    """

    __tablename__ = "dashboard_user"

    user_name: Mapped[str] = mapped_column(String(64), nullable=False)
    password: Mapped[str | None] = mapped_column(String(128), nullable=True)
    role: Mapped[int] = mapped_column(
        Integer, nullable=False, default=1, server_default=text("1")
    )
    enabled: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )

    __table_args__ = (
        UniqueConstraint("user_name", name=USER_NAME_CONSTRAINT),
    )
