import uuid


def new_id() -> str:
    return uuid.uuid4().hex


def iso(dt):
    return dt.isoformat() + "Z" if dt else None
