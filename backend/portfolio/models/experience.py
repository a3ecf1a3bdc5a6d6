from portfolio.extensions import db
from .base import BaseModel, OrderedMixin


class ExperienceItem(BaseModel, OrderedMixin):
    __tablename__ = "experience_items"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False, index=True)
    position_title = db.Column(db.String(300), nullable=False)
    company_name = db.Column(db.String(300), nullable=False)
    period = db.Column(db.String(100), nullable=False)
    summary = db.Column(db.Text, nullable=False, default="")
    description = db.Column(db.Text, nullable=False, default="")
    image_src = db.Column(db.String(1024), nullable=False, default="")

    section = db.relationship("Section", back_populates="experience_items")
    detail_images = db.relationship(
        "ExperienceDetailImage",
        back_populates="experience_item",
        order_by="ExperienceDetailImage.order",
        cascade="all, delete-orphan",
    )


class ExperienceDetailImage(BaseModel, OrderedMixin):
    __tablename__ = "experience_detail_images"

    experience_item_id = db.Column(
        db.String(36), db.ForeignKey("experience_items.id"), nullable=False, index=True
    )
    src = db.Column(db.String(1024), nullable=False)
    image_public_id = db.Column(db.String(512), nullable=True)
    alt = db.Column(db.String(300), nullable=False, default="Experience detail image")
    caption = db.Column(db.String(500), nullable=True)

    experience_item = db.relationship("ExperienceItem", back_populates="detail_images")
