from .common import with_timestamps


def normalize_text_block(block):
    return with_timestamps(block, {
        "id": block.id,
        "sectionId": block.section_id,
        "kind": "text",
        "order": block.order,
        "content": block.content,
        "fontSize": block.font_size,
        "fontFamily": block.font_family,
    })


def normalize_image_block(block):
    return with_timestamps(block, {
        "id": block.id,
        "sectionId": block.section_id,
        "kind": "image",
        "order": block.order,
        "src": block.src,
        "imagePublicId": block.image_public_id,
        "alt": block.alt,
        "caption": block.caption,
    })


def normalize_content_block(block):
    return with_timestamps(block, {
        "id": block.id,
        "sectionId": block.section_id,
        "type": block.type,
        "order": block.order,
        "content": block.content,
        "imageSrc": block.image_src,
        "imageAlt": block.image_alt,
        "imagePublicId": block.image_public_id,
        "linkUrl": block.link_url,
        "fontSize": block.font_size,
        "fontWeight": block.font_weight,
        "fontStyle": block.font_style,
        "textAlign": block.text_align,
    })
