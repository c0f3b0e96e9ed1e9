"""
User account model
Stands in for the hosted auth service: email/password accounts with bearer tokens
"""

import uuid
from werkzeug.security import generate_password_hash, check_password_hash

# Import shared db instance
from . import db, utcnow

class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow)
    last_sign_in_at = db.Column(db.DateTime, nullable=True)

    profile = db.relationship('Profile', backref='user', uselist=False, cascade='all, delete-orphan')
    identity = db.relationship('EncryptedIdentity', backref='user', uselist=False, cascade='all, delete-orphan')

    @property
    def default_display_name(self):
        """Local part of the email, used when no display name was given"""
        return self.email.split('@')[0] if self.email else ''

    def set_password(self, password):
        """Set password hash"""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """Check password"""
        return check_password_hash(self.password_hash, password)

    def mark_signed_in(self):
        self.last_sign_in_at = utcnow()

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'email': self.email,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'last_sign_in_at': self.last_sign_in_at.isoformat() if self.last_sign_in_at else None
        }

    @classmethod
    def get_by_email(cls, email):
        """Get user by email (case-insensitive)"""
        if not email:
            return None
        return cls.query.filter(db.func.lower(cls.email) == email.lower()).first()

    @classmethod
    def create_user(cls, email, password, **kwargs):
        """Create new user"""
        user = cls(
            email=email,
            **kwargs
        )
        user.set_password(password)
        return user

    def __repr__(self):
        return f'<User {self.email}>'
