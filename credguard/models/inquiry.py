"""
Sales inquiry model for the marketing site's "contact sales" form
"""

import uuid

# Import shared db instance
from . import db, utcnow

class SalesInquiry(db.Model):
    __tablename__ = 'sales_inquiries'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    company = db.Column(db.String(150), nullable=True)
    email = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=True)
    status = db.Column(db.String(20), default='new')  # new, contacted, closed
    created_at = db.Column(db.DateTime, default=utcnow)

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'company': self.company,
            'email': self.email,
            'message': self.message,
            'status': self.status,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    @classmethod
    def create_inquiry(cls, first_name, last_name, email, **kwargs):
        """Create new inquiry"""
        return cls(
            first_name=first_name,
            last_name=last_name,
            email=email,
            **kwargs
        )

    def __repr__(self):
        return f'<SalesInquiry {self.email}>'
