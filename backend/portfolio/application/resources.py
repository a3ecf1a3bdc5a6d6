from typing import Any, Dict

from portfolio.errors import InvalidInput, NotFound
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
from portfolio.normalizers.block import (
    normalize_text_block,
    normalize_image_block,
    normalize_content_block,
)
from portfolio.normalizers.item import (
    normalize_education_item,
    normalize_education_image,
    normalize_experience_item,
    normalize_experience_image,
    normalize_skill_item,
    normalize_skill_image,
    normalize_project_item,
    normalize_testimonial_item,
    normalize_contact_info_item,
)
from . import collections
from .crud import EntityResource, ParentRef

SECTION_PARENT = ParentRef("sectionId", "section_id", Section, "Section")

ALLOWED_CONTACT_TYPES = (
    "email",
    "phone",
    "linkedin",
    "github",
    "twitter",
    "facebook",
    "instagram",
    "website",
    "other",
)


def _expect_int(values: Dict[str, Any], attr: str, key: str) -> None:
    value = values.get(attr)
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise InvalidInput(f"Invalid data type for {key}")


def _validate_text_block(values):
    if "content" in values and not isinstance(values["content"], str):
        raise InvalidInput("Invalid data type for content")
    _expect_int(values, "font_size", "fontSize")


def _validate_content_block(values):
    _expect_int(values, "font_size", "fontSize")


def _validate_skill(values):
    _expect_int(values, "level", "level")


def _validate_testimonial(values):
    if "rating" not in values:
        return
    rating = values["rating"]
    if isinstance(rating, bool) or not isinstance(rating, (int, float)) or not 0 <= rating <= 5:
        raise InvalidInput("Rating must be a number between 0 and 5.")


def _validate_contact_info(values):
    if "type" in values and values["type"] not in ALLOWED_CONTACT_TYPES:
        raise InvalidInput(
            f"Invalid type provided. Allowed types are: {', '.join(ALLOWED_CONTACT_TYPES)}"
        )


def _validate_project(values):
    if "category_ids" not in values:
        return

    category_ids = values["category_ids"]
    if not isinstance(category_ids, list) or not all(isinstance(c, str) for c in category_ids):
        raise InvalidInput("categoryIds must be an array of strings.")

    # Deduplicate, keeping the caller's order
    category_ids = list(dict.fromkeys(category_ids))
    if category_ids:
        found = {c.id for c in Category.query.filter(Category.id.in_(category_ids)).all()}
        missing = [c for c in category_ids if c not in found]
        if missing:
            raise NotFound(f"Category not found: {', '.join(missing)}")

    values["category_ids"] = category_ids


def _education_blobs(item):
    return [image.image_public_id for image in item.images]


def _experience_blobs(item):
    return [image.image_public_id for image in item.detail_images]


TEXT_BLOCKS = EntityResource(
    label="Text block",
    model=TextBlock,
    normalize=normalize_text_block,
    fields={"content": "content", "fontSize": "font_size", "fontFamily": "font_family"},
    parent=SECTION_PARENT,
    ordering=collections.BLOCKS,
    validate=_validate_text_block,
)

IMAGE_BLOCKS = EntityResource(
    label="Image block",
    model=ImageBlock,
    normalize=normalize_image_block,
    fields={"src": "src", "imagePublicId": "image_public_id", "alt": "alt", "caption": "caption"},
    required=("src", "imagePublicId"),
    parent=SECTION_PARENT,
    ordering=collections.BLOCKS,
    blob_fields=("image_public_id",),
)

CONTENT_BLOCKS = EntityResource(
    label="Content block",
    model=CustomSectionContentBlock,
    normalize=normalize_content_block,
    fields={
        "type": "type",
        "content": "content",
        "imageSrc": "image_src",
        "imageAlt": "image_alt",
        "imagePublicId": "image_public_id",
        "linkUrl": "link_url",
        "fontSize": "font_size",
        "fontWeight": "font_weight",
        "fontStyle": "font_style",
        "textAlign": "text_align",
    },
    required=("type",),
    parent=SECTION_PARENT,
    ordering=collections.CONTENT_BLOCKS,
    validate=_validate_content_block,
    blob_fields=("image_public_id",),
)

EDUCATION_ITEMS = EntityResource(
    label="Education item",
    model=EducationItem,
    normalize=normalize_education_item,
    fields={
        "institution": "institution",
        "period": "period",
        "degree": "degree",
        "description": "description",
    },
    required=("institution", "period"),
    parent=SECTION_PARENT,
    ordering=collections.EDUCATION,
    cascade_blobs=_education_blobs,
)

EDUCATION_IMAGES = EntityResource(
    label="Education image",
    model=EducationImage,
    normalize=normalize_education_image,
    fields={"src": "src", "alt": "alt", "imagePublicId": "image_public_id"},
    required=("src", "imagePublicId"),
    parent=ParentRef("educationItemId", "education_item_id", EducationItem, "Education item"),
    ordering=collections.EDUCATION_IMAGES,
    blob_fields=("image_public_id",),
)

EXPERIENCE_ITEMS = EntityResource(
    label="Experience item",
    model=ExperienceItem,
    normalize=normalize_experience_item,
    fields={
        "positionTitle": "position_title",
        "companyName": "company_name",
        "period": "period",
        "summary": "summary",
        "description": "description",
        "imageSrc": "image_src",
    },
    required=("positionTitle", "companyName", "period"),
    parent=SECTION_PARENT,
    ordering=collections.EXPERIENCE,
    cascade_blobs=_experience_blobs,
)

EXPERIENCE_IMAGES = EntityResource(
    label="Experience detail image",
    model=ExperienceDetailImage,
    normalize=normalize_experience_image,
    fields={"src": "src", "alt": "alt", "caption": "caption", "imagePublicId": "image_public_id"},
    required=("src",),
    parent=ParentRef("experienceItemId", "experience_item_id", ExperienceItem, "Experience item"),
    ordering=collections.EXPERIENCE_IMAGES,
    blob_fields=("image_public_id",),
)

SKILL_ITEMS = EntityResource(
    label="Skill item",
    model=SkillItem,
    normalize=normalize_skill_item,
    fields={"title": "title", "description": "description", "level": "level"},
    required=("title",),
    parent=SECTION_PARENT,
    ordering=collections.SKILLS,
    validate=_validate_skill,
)

SKILL_IMAGES = EntityResource(
    label="Skill image",
    model=SkillImage,
    normalize=normalize_skill_image,
    fields={"src": "src", "alt": "alt", "caption": "caption", "imagePublicId": "image_public_id"},
    required=("src", "imagePublicId"),
    parent=SECTION_PARENT,
    ordering=collections.SKILL_IMAGES,
    blob_fields=("image_public_id",),
)

PROJECT_ITEMS = EntityResource(
    label="Project",
    model=ProjectItem,
    normalize=normalize_project_item,
    fields={
        "projectNumber": "project_number",
        "title": "title",
        "companyName": "company_name",
        "description1": "description1",
        "description2": "description2",
        "imageSrc": "image_src",
        "imageAlt": "image_alt",
        "imagePublicId": "image_public_id",
        "layout": "layout",
        "categoryIds": "category_ids",
    },
    required=("title",),
    parent=SECTION_PARENT,
    ordering=collections.PROJECTS,
    validate=_validate_project,
    blob_fields=("image_public_id",),
)

TESTIMONIALS = EntityResource(
    label="Testimonial",
    model=TestimonialItem,
    normalize=normalize_testimonial_item,
    fields={
        "clientName": "client_name",
        "role": "role",
        "company": "company",
        "content": "content",
        "rating": "rating",
        "imageSrc": "image_src",
    },
    required=("clientName", "content", "rating"),
    parent=SECTION_PARENT,
    ordering=collections.TESTIMONIALS,
    validate=_validate_testimonial,
)

CONTACT_INFO = EntityResource(
    label="Contact info item",
    model=ContactInfoItem,
    normalize=normalize_contact_info_item,
    fields={"type": "type", "value": "value", "label": "label"},
    required=("type", "value"),
    parent=SECTION_PARENT,
    ordering=collections.CONTACT_INFO,
    validate=_validate_contact_info,
)
