def iso(value):
    return value.isoformat() if value is not None else None


def with_timestamps(entity, data):
    data["createdAt"] = iso(entity.created_at)
    data["updatedAt"] = iso(entity.updated_at)
    return data
