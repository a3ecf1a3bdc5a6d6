from .section import Section
from .content_block import TextBlock, ImageBlock, CustomSectionContentBlock
from .education import EducationItem, EducationImage
from .experience import ExperienceItem, ExperienceDetailImage
from .skill import SkillItem, SkillImage
from .project import Category, ProjectItem
from .testimonial import TestimonialItem
from .contact_info import ContactInfoItem
from .hero import HeroContent
from .setting import Setting, DEFAULT_SETTINGS
from .user import User

__all__ = [
    "Section",
    "TextBlock",
    "ImageBlock",
    "CustomSectionContentBlock",
    "EducationItem",
    "EducationImage",
    "ExperienceItem",
    "ExperienceDetailImage",
    "SkillItem",
    "SkillImage",
    "Category",
    "ProjectItem",
    "TestimonialItem",
    "ContactInfoItem",
    "HeroContent",
    "Setting",
    "DEFAULT_SETTINGS",
    "User",
]
