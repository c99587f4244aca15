from city_explorer.extensions import db
from city_explorer.models.base import CachedRecordMixin


class Movie(CachedRecordMixin, db.Model):
    __tablename__ = 'movies'

    FIELDS = (
        'title', 'overview', 'average_votes', 'total_votes',
        'image_url', 'popularity', 'released_on',
    )

    title = db.Column(db.String(512))
    overview = db.Column(db.Text)
    average_votes = db.Column(db.Float)
    total_votes = db.Column(db.Integer)
    image_url = db.Column(db.String(2048))
    popularity = db.Column(db.Float)
    released_on = db.Column(db.String(32))
