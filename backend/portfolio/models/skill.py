from portfolio.extensions import db
from .base import BaseModel, OrderedMixin


class SkillItem(BaseModel, OrderedMixin):
    __tablename__ = "skill_items"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    level = db.Column(db.Integer, nullable=False, default=0)

    section = db.relationship("Section", back_populates="skill_items")


class SkillImage(BaseModel, OrderedMixin):
    __tablename__ = "skill_images"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False, index=True)
    src = db.Column(db.String(1024), nullable=False)
    image_public_id = db.Column(db.String(512), nullable=False)
    alt = db.Column(db.String(300), nullable=False, default="Skill image")
    caption = db.Column(db.String(500), nullable=True)

    section = db.relationship("Section", back_populates="skill_images")
