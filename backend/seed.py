"""
Seed command for categories and words.

Loads a JSON document of the form
    {"categories": [{"id": ..., "name": ..., "approved": true}, ...],
     "words": [{"id": ..., "word": ..., "category_id": ..., "approved": true}, ...]}
into the configured database. Ids are optional and generated when missing.

Usage:
    flask --app app seed-words data/sample_words.json
"""

import json
import logging
import click
from flask.cli import with_appcontext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import FlushError
from extensions import db
from models import Category, Word

logger = logging.getLogger(__name__)


def _approved_flag(item: dict, label: str) -> bool:
    # JSON strings like "false" must not be coerced to True
    approved = item.get('approved', False)
    if not isinstance(approved, bool):
        raise ValueError(f"{label} field 'approved' must be true or false")
    return approved


def build_rows(data: dict) -> tuple[list[Category], list[Word]]:
    """Validate the seed document and build model instances. Raises ValueError on bad input."""
    if not isinstance(data, dict):
        raise ValueError("Seed file must contain a JSON object")

    categories = []
    for i, item in enumerate(data.get('categories', [])):
        if not isinstance(item, dict):
            raise ValueError(f"Category {i+1} must be an object")
        if not item.get('name'):
            raise ValueError(f"Category {i+1} is missing required field: name")
        category = Category(name=item['name'], approved=_approved_flag(item, f"Category {i+1}"))
        if item.get('id'):
            category.id = item['id']
        categories.append(category)

    known_ids = {c.id for c in categories if c.id}
    words = []
    for i, item in enumerate(data.get('words', [])):
        if not isinstance(item, dict):
            raise ValueError(f"Word {i+1} must be an object")
        for key in ('word', 'category_id'):
            if not item.get(key):
                raise ValueError(f"Word {i+1} is missing required field: {key}")
        if item['category_id'] not in known_ids and Category.get_by_id(item['category_id']) is None:
            raise ValueError(f"Word {i+1} references unknown category: {item['category_id']}")
        word = Word(word=item['word'], category_id=item['category_id'], approved=_approved_flag(item, f"Word {i+1}"))
        if item.get('id'):
            word.id = item['id']
        words.append(word)

    return categories, words


def save_rows(categories, words):
    try:
        db.session.add_all(categories)
        # Categories must exist before words reference them
        db.session.flush()
        db.session.add_all(words)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


@click.command('seed-words')
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@with_appcontext
def seed_words_command(path):
    """Load categories and words from a JSON file."""
    with open(path, encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise click.ClickException(f"Invalid JSON in {path}: {e}")

    try:
        categories, words = build_rows(data)
    except ValueError as e:
        raise click.ClickException(str(e))

    try:
        save_rows(categories, words)
    except (IntegrityError, FlushError) as e:
        # Duplicate ids, within the file or against rows already stored
        raise click.ClickException(f"Seed rows conflict with existing data: {getattr(e, 'orig', None) or e}")

    logger.info(f"Seeded {len(categories)} categories and {len(words)} words from {path}")
    click.echo(f"Seeded {len(categories)} categories and {len(words)} words")
