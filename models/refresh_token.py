"""
RefreshToken model: opaque long-lived tokens issued at login.
Fields:
- token (primary key) - 64 hex chars
- user_id (String(36)) - FK to users.id
- expires_at
- revoked_at (nullable) - set once by revoke, never cleared
- created_at, updated_at
Rows are kept after expiry or revocation.
"""
from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from models.base_model import TimestampMixin, Base, UTCDateTime


class RefreshToken(TimestampMixin, Base):
    __tablename__ = "refresh_tokens"

    token = Column(String(64), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    expires_at = Column(UTCDateTime(timezone=True), nullable=False)
    revoked_at = Column(UTCDateTime(timezone=True), nullable=True)

    user = relationship("User", back_populates="refresh_tokens")

    def __repr__(self):
        return f"<RefreshToken user_id={self.user_id} revoked={self.revoked_at is not None}>"
