from .common import with_timestamps


def normalize_education_image(image):
    return with_timestamps(image, {
        "id": image.id,
        "educationItemId": image.education_item_id,
        "order": image.order,
        "src": image.src,
        "alt": image.alt,
        "imagePublicId": image.image_public_id,
    })


def normalize_education_item(item, include_images=True):
    data = {
        "id": item.id,
        "sectionId": item.section_id,
        "order": item.order,
        "institution": item.institution,
        "period": item.period,
        "degree": item.degree,
        "description": item.description,
    }
    if include_images:
        data["images"] = [normalize_education_image(i) for i in sorted(item.images, key=lambda i: i.order)]
    return with_timestamps(item, data)


def normalize_experience_image(image):
    return with_timestamps(image, {
        "id": image.id,
        "experienceItemId": image.experience_item_id,
        "order": image.order,
        "src": image.src,
        "alt": image.alt,
        "caption": image.caption,
        "imagePublicId": image.image_public_id,
    })


def normalize_experience_item(item, include_images=True):
    data = {
        "id": item.id,
        "sectionId": item.section_id,
        "order": item.order,
        "positionTitle": item.position_title,
        "companyName": item.company_name,
        "period": item.period,
        "summary": item.summary,
        "description": item.description,
        "imageSrc": item.image_src,
    }
    if include_images:
        data["detailImages"] = [
            normalize_experience_image(i) for i in sorted(item.detail_images, key=lambda i: i.order)
        ]
    return with_timestamps(item, data)


def normalize_skill_item(item):
    return with_timestamps(item, {
        "id": item.id,
        "sectionId": item.section_id,
        "order": item.order,
        "title": item.title,
        "description": item.description,
        "level": item.level,
    })


def normalize_skill_image(image):
    return with_timestamps(image, {
        "id": image.id,
        "sectionId": image.section_id,
        "order": image.order,
        "src": image.src,
        "alt": image.alt,
        "caption": image.caption,
        "imagePublicId": image.image_public_id,
    })


def normalize_project_item(item):
    return with_timestamps(item, {
        "id": item.id,
        "sectionId": item.section_id,
        "order": item.order,
        "projectNumber": item.project_number,
        "title": item.title,
        "companyName": item.company_name,
        "description1": item.description1,
        "description2": item.description2,
        "imageSrc": item.image_src,
        "imageAlt": item.image_alt,
        "imagePublicId": item.image_public_id,
        "layout": item.layout,
        "categoryIds": list(item.category_ids or []),
    })


def normalize_category(category):
    return with_timestamps(category, {
        "id": category.id,
        "name": category.name,
        "order": category.order,
    })


def normalize_testimonial_item(item):
    return with_timestamps(item, {
        "id": item.id,
        "sectionId": item.section_id,
        "order": item.order,
        "clientName": item.client_name,
        "role": item.role,
        "company": item.company,
        "content": item.content,
        "rating": item.rating,
        "imageSrc": item.image_src,
    })


def normalize_contact_info_item(item):
    return with_timestamps(item, {
        "id": item.id,
        "sectionId": item.section_id,
        "order": item.order,
        "type": item.type,
        "value": item.value,
        "label": item.label,
    })


def normalize_hero_content(hero):
    if hero is None:
        return None
    return with_timestamps(hero, {
        "id": hero.id,
        "sectionId": hero.section_id,
        "portraitImageSrc": hero.portrait_image_src,
        "portraitAlt": hero.portrait_alt,
        "portraitPublicId": hero.portrait_public_id,
    })
