from datetime import datetime, timezone
from sqlalchemy.orm import declared_attr
from city_explorer.extensions import db


def utcnow():
    return datetime.now(timezone.utc)


def as_utc(value):
    """SQLite hands back naive datetimes; treat them as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class CachedRecordMixin:
    """Columns shared by every per-location category table.

    Subclasses list their provider fields in FIELDS; those are exactly the
    columns written on save and read back on lookup.
    """

    FIELDS = ()

    id = db.Column(db.Integer, primary_key=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    @declared_attr
    def location_id(cls):
        return db.Column(
            db.Integer,
            db.ForeignKey('locations.id', ondelete='CASCADE'),
            nullable=False,
            index=True,
        )

    def age_minutes(self, now=None):
        now = now or utcnow()
        return (now - as_utc(self.created_at)).total_seconds() / 60.0

    def to_dict(self):
        data = {field: getattr(self, field) for field in self.FIELDS}
        data['id'] = self.id
        data['location_id'] = self.location_id
        data['created_at'] = self.created_at.isoformat() if self.created_at else None
        return data
