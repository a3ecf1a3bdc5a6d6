from portfolio.extensions import db
from .base import BaseModel, OrderedMixin


class TextBlock(BaseModel, OrderedMixin):
    __tablename__ = "text_blocks"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False, index=True)
    content = db.Column(db.Text, nullable=False, default="")
    font_size = db.Column(db.Integer, nullable=True)
    font_family = db.Column(db.String(100), nullable=True)

    section = db.relationship("Section", back_populates="text_blocks")


class ImageBlock(BaseModel, OrderedMixin):
    __tablename__ = "image_blocks"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False, index=True)
    src = db.Column(db.String(1024), nullable=False)
    image_public_id = db.Column(db.String(512), nullable=False)
    alt = db.Column(db.String(300), nullable=False, default="")
    caption = db.Column(db.String(500), nullable=True)

    section = db.relationship("Section", back_populates="image_blocks")


class CustomSectionContentBlock(BaseModel, OrderedMixin):
    __tablename__ = "custom_section_content_blocks"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False, index=True)
    type = db.Column(db.String(50), nullable=False)  # TEXT, IMAGE, LINK, ...
    content = db.Column(db.Text, nullable=True)
    image_src = db.Column(db.String(1024), nullable=True)
    image_alt = db.Column(db.String(300), nullable=True)
    image_public_id = db.Column(db.String(512), nullable=True)
    link_url = db.Column(db.String(1024), nullable=True)
    font_size = db.Column(db.Integer, nullable=True)
    font_weight = db.Column(db.String(50), nullable=True)
    font_style = db.Column(db.String(50), nullable=True)
    text_align = db.Column(db.String(20), nullable=True)

    section = db.relationship("Section", back_populates="content_blocks")
