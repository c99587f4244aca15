from city_explorer.extensions import db
from city_explorer.models.base import CachedRecordMixin


class Trail(CachedRecordMixin, db.Model):
    __tablename__ = 'trails'

    FIELDS = (
        'name', 'location', 'length', 'stars', 'star_votes', 'summary',
        'trail_url', 'conditions', 'condition_date', 'condition_time',
    )

    name = db.Column(db.String(256))
    location = db.Column(db.String(256))
    length = db.Column(db.Float)
    stars = db.Column(db.Float)
    star_votes = db.Column(db.Integer)
    summary = db.Column(db.Text)
    trail_url = db.Column(db.String(2048))
    conditions = db.Column(db.Text)
    condition_date = db.Column(db.String(16))
    condition_time = db.Column(db.String(16))
