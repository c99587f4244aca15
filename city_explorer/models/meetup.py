from city_explorer.extensions import db
from city_explorer.models.base import CachedRecordMixin


class Meetup(CachedRecordMixin, db.Model):
    __tablename__ = 'meetups'

    FIELDS = ('link', 'name', 'creation_date', 'host')

    link = db.Column(db.String(2048))
    name = db.Column(db.String(512))
    creation_date = db.Column(db.String(32))
    host = db.Column(db.String(256))
