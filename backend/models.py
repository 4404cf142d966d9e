# File containing all models for Flask SQLAlchemy
# 2 models to be defined: Category, Word

import uuid
from extensions import db


def new_id() -> str:
    # Identifiers are opaque text so rows can be created without a round trip to the database
    return str(uuid.uuid4())


class Category(db.Model):
    __tablename__ = 'categories'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    name = db.Column(db.String(150), nullable=False)
    approved = db.Column(db.Boolean, nullable=False, default=False)

    words = db.relationship('Word', back_populates='category')

    def __repr__(self):
        return f"{self.id} - {self.name} - approved={self.approved}"

    @classmethod
    def get_by_id(cls, id: str):
        # Returns a Category object
        return cls.query.filter_by(id=id).first()


class Word(db.Model):
    __tablename__ = 'words'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    word = db.Column(db.String(150), nullable=False)
    category_id = db.Column(db.String(36), db.ForeignKey("categories.id"), nullable=False)
    approved = db.Column(db.Boolean, nullable=False, default=False)

    category = db.relationship('Category', back_populates='words')

    def __repr__(self):
        return f"{self.id} - {self.word} - category {self.category_id} - approved={self.approved}"

    @classmethod
    def get_by_id(cls, id: str):
        # Returns a Word object
        return cls.query.filter_by(id=id).first()


# Table name -> model, the set of tables the read-only data service can select from
TABLES = {
    Category.__tablename__: Category,
    Word.__tablename__: Word,
}
