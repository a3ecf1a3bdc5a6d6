from portfolio.extensions import db
from .base import BaseModel, OrderedMixin


class EducationItem(BaseModel, OrderedMixin):
    __tablename__ = "education_items"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False, index=True)
    institution = db.Column(db.String(300), nullable=False)
    period = db.Column(db.String(100), nullable=False)
    degree = db.Column(db.String(300), nullable=False, default="")
    description = db.Column(db.Text, nullable=False, default="")

    section = db.relationship("Section", back_populates="education_items")
    images = db.relationship(
        "EducationImage",
        back_populates="education_item",
        order_by="EducationImage.order",
        cascade="all, delete-orphan",
    )


class EducationImage(BaseModel, OrderedMixin):
    __tablename__ = "education_images"

    education_item_id = db.Column(
        db.String(36), db.ForeignKey("education_items.id"), nullable=False, index=True
    )
    src = db.Column(db.String(1024), nullable=False)
    image_public_id = db.Column(db.String(512), nullable=False)
    alt = db.Column(db.String(300), nullable=False, default="Education detail image")

    education_item = db.relationship("EducationItem", back_populates="images")
