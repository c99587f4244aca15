from city_explorer.extensions import db
from city_explorer.models.base import CachedRecordMixin


class Restaurant(CachedRecordMixin, db.Model):
    __tablename__ = 'restaurants'

    FIELDS = ('name', 'image_url', 'price', 'rating', 'url')

    name = db.Column(db.String(256))
    image_url = db.Column(db.String(2048))
    price = db.Column(db.String(8))
    rating = db.Column(db.Float)
    url = db.Column(db.String(2048))
