from sqlalchemy import Column, ForeignKey, Index, String, Text
from sqlalchemy.orm import relationship

from models.base_model import BaseModel, Base


class Chirp(BaseModel, Base):
    __tablename__ = "chirps"

    body = Column(Text, nullable=False)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    user = relationship("User", back_populates="chirps")

    __table_args__ = (
        Index("ix_chirps_user_id_created_at", "user_id", "created_at"),
    )
