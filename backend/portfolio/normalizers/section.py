from .common import with_timestamps
from .block import normalize_text_block, normalize_image_block, normalize_content_block
from .item import (
    normalize_education_item,
    normalize_experience_item,
    normalize_skill_item,
    normalize_skill_image,
    normalize_project_item,
    normalize_testimonial_item,
    normalize_contact_info_item,
    normalize_hero_content,
)

# JSON key -> (relationship attribute, normalizer)
CHILD_COLLECTIONS = {
    "textBlocks": ("text_blocks", normalize_text_block),
    "imageBlocks": ("image_blocks", normalize_image_block),
    "customContentBlocks": ("content_blocks", normalize_content_block),
    "educationItems": ("education_items", normalize_education_item),
    "experienceItems": ("experience_items", normalize_experience_item),
    "skillItems": ("skill_items", normalize_skill_item),
    "skillImages": ("skill_images", normalize_skill_image),
    "projectItems": ("project_items", normalize_project_item),
    "testimonialItems": ("testimonial_items", normalize_testimonial_item),
    "contactInfoItems": ("contact_info_items", normalize_contact_info_item),
}


def normalize_section(section, include_children=False):
    data = {
        "id": section.id,
        "title": section.title,
        "slug": section.slug,
        "type": section.type,
        "order": section.order,
        "visible": section.visible,
    }

    if include_children:
        for key, (attr, normalize) in CHILD_COLLECTIONS.items():
            children = sorted(getattr(section, attr), key=lambda c: c.order)
            data[key] = [normalize(child) for child in children]
        data["heroContent"] = normalize_hero_content(section.hero_content)

    return with_timestamps(section, data)
