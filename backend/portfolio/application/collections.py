from portfolio.models import (
    Section,
    Category,
    TextBlock,
    ImageBlock,
    CustomSectionContentBlock,
    EducationItem,
    EducationImage,
    ExperienceItem,
    ExperienceDetailImage,
    SkillItem,
    SkillImage,
    ProjectItem,
    TestimonialItem,
    ContactInfoItem,
)
from portfolio.utils.order import OrderedCollection

SECTIONS = OrderedCollection("sections", (Section,), scope_field=None)
CATEGORIES = OrderedCollection("categories", (Category,), scope_field=None)

# Text and image blocks of one section share a single sequence
BLOCKS = OrderedCollection("blocks", (TextBlock, ImageBlock))
CONTENT_BLOCKS = OrderedCollection("content blocks", (CustomSectionContentBlock,))
EDUCATION = OrderedCollection("education items", (EducationItem,))
EXPERIENCE = OrderedCollection("experience items", (ExperienceItem,))
SKILLS = OrderedCollection("skills", (SkillItem,))
SKILL_IMAGES = OrderedCollection("skill images", (SkillImage,))
PROJECTS = OrderedCollection("projects", (ProjectItem,))
TESTIMONIALS = OrderedCollection("testimonials", (TestimonialItem,))
CONTACT_INFO = OrderedCollection("contact info", (ContactInfoItem,))

EDUCATION_IMAGES = OrderedCollection(
    "education images", (EducationImage,), scope_field="education_item_id"
)
EXPERIENCE_IMAGES = OrderedCollection(
    "experience images", (ExperienceDetailImage,), scope_field="experience_item_id"
)

# Collections reorderable through /sections/<id>/<name>/reorder
SECTION_REORDERABLE = {
    "projects": PROJECTS,
    "experience": EXPERIENCE,
    "education": EDUCATION,
    "skills": SKILLS,
    "blocks": BLOCKS,
    "content-blocks": CONTENT_BLOCKS,
}
