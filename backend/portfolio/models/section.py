from portfolio.extensions import db
from .base import BaseModel, OrderedMixin


def _children(model_name):
    return db.relationship(
        model_name,
        back_populates="section",
        order_by=f"{model_name}.order",
        cascade="all, delete-orphan",
    )


class Section(BaseModel, OrderedMixin):
    __tablename__ = "sections"

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    type = db.Column(db.String(50), nullable=False)  # hero, about, projects, custom, ...
    visible = db.Column(db.Boolean, nullable=False, default=True)

    text_blocks = _children("TextBlock")
    image_blocks = _children("ImageBlock")
    content_blocks = _children("CustomSectionContentBlock")
    education_items = _children("EducationItem")
    experience_items = _children("ExperienceItem")
    skill_items = _children("SkillItem")
    skill_images = _children("SkillImage")
    project_items = _children("ProjectItem")
    testimonial_items = _children("TestimonialItem")
    contact_info_items = _children("ContactInfoItem")

    hero_content = db.relationship(
        "HeroContent",
        back_populates="section",
        uselist=False,
        cascade="all, delete-orphan",
    )
