from portfolio.extensions import db
from .base import BaseModel, OrderedMixin


class ContactInfoItem(BaseModel, OrderedMixin):
    __tablename__ = "contact_info_items"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False, index=True)
    type = db.Column(db.String(30), nullable=False)  # email, phone, linkedin, ...
    value = db.Column(db.String(500), nullable=False)
    label = db.Column(db.String(200), nullable=True)

    section = db.relationship("Section", back_populates="contact_info_items")
