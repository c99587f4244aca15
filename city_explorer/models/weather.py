from city_explorer.extensions import db
from city_explorer.models.base import CachedRecordMixin


class Weather(CachedRecordMixin, db.Model):
    __tablename__ = 'weathers'

    FIELDS = ('forecast', 'time')

    forecast = db.Column(db.Text)
    time = db.Column(db.String(32))
