from portfolio.extensions import db
from .base import BaseModel


class HeroContent(BaseModel):
    __tablename__ = "hero_contents"

    section_id = db.Column(
        db.String(36), db.ForeignKey("sections.id"), nullable=False, unique=True
    )
    portrait_image_src = db.Column(db.String(1024), nullable=True)
    portrait_alt = db.Column(db.String(300), nullable=True)
    portrait_public_id = db.Column(db.String(512), nullable=True)

    section = db.relationship("Section", back_populates="hero_content")
