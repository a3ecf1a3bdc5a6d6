from portfolio.extensions import db
from .base import BaseModel, OrderedMixin


class Category(BaseModel, OrderedMixin):
    __tablename__ = "categories"

    name = db.Column(db.String(100), nullable=False, unique=True)


class ProjectItem(BaseModel, OrderedMixin):
    __tablename__ = "project_items"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False, index=True)
    title = db.Column(db.String(300), nullable=False)
    project_number = db.Column(db.String(20), nullable=True)
    company_name = db.Column(db.String(300), nullable=True)
    description1 = db.Column(db.Text, nullable=False, default="")
    description2 = db.Column(db.Text, nullable=True)
    image_src = db.Column(db.String(1024), nullable=True)
    image_alt = db.Column(db.String(300), nullable=True)
    image_public_id = db.Column(db.String(512), nullable=True)
    layout = db.Column(db.String(50), nullable=True)

    # Category ids; not a foreign key, cleaned up when a category is deleted
    category_ids = db.Column(db.JSON, nullable=False, default=list)

    section = db.relationship("Section", back_populates="project_items")
