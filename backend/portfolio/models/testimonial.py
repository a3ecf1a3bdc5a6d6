from portfolio.extensions import db
from .base import BaseModel, OrderedMixin


class TestimonialItem(BaseModel, OrderedMixin):
    __tablename__ = "testimonial_items"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False, index=True)
    client_name = db.Column(db.String(200), nullable=False)
    role = db.Column(db.String(200), nullable=True)
    company = db.Column(db.String(200), nullable=True)
    content = db.Column(db.Text, nullable=False)
    rating = db.Column(db.Float, nullable=False, default=0)
    image_src = db.Column(db.String(1024), nullable=True)

    section = db.relationship("Section", back_populates="testimonial_items")
