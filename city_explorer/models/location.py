from city_explorer.extensions import db
from city_explorer.models.base import utcnow


class Location(db.Model):
    __tablename__ = 'locations'

    id = db.Column(db.Integer, primary_key=True)
    search_query = db.Column(db.String(256), nullable=False, index=True)
    formatted_query = db.Column(db.String(512))
    latitude = db.Column(db.Float, nullable=False)
    longitude = db.Column(db.Float, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'search_query': self.search_query,
            'formatted_query': self.formatted_query,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
