"""
Tests for the `flask seed-words` command in seed.py.
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import json


def _write_seed(tmp_path, data):
    path = tmp_path / 'seed.json'
    path.write_text(json.dumps(data), encoding='utf-8')
    return str(path)


def test_seed_loads_rows_served_by_words_endpoint(app, client, db, tmp_path):
    path = _write_seed(tmp_path, {
        'categories': [
            {'id': 'C1', 'name': 'fruit', 'approved': True},
            {'id': 'C2', 'name': 'vehicles'},
        ],
        'words': [
            {'id': 'W1', 'word': 'pear', 'category_id': 'C1', 'approved': True},
            {'id': 'W2', 'word': 'apple', 'category_id': 'C1', 'approved': True},
            {'id': 'W3', 'word': 'bus', 'category_id': 'C2', 'approved': True},
        ],
    })

    result = app.test_cli_runner().invoke(args=['seed-words', path])

    assert result.exit_code == 0, result.output
    assert 'Seeded 2 categories and 3 words' in result.output
    body = client.get('/api/words').get_json()
    assert body == {'words': [
        {'id': 'W2', 'word': 'apple', 'categoryId': 'C1'},
        {'id': 'W1', 'word': 'pear', 'categoryId': 'C1'},
    ]}


def test_seed_generates_ids_and_defaults_to_unapproved(app, db, tmp_path):
    from models import Category
    path = _write_seed(tmp_path, {'categories': [{'name': 'fruit'}]})

    result = app.test_cli_runner().invoke(args=['seed-words', path])

    assert result.exit_code == 0, result.output
    categories = Category.query.all()
    assert len(categories) == 1
    assert len(categories[0].id) == 36
    assert categories[0].approved is False


def test_seed_missing_field_commits_nothing(app, db, tmp_path):
    from models import Category, Word
    path = _write_seed(tmp_path, {
        'categories': [{'id': 'C1', 'name': 'fruit', 'approved': True}],
        'words': [{'id': 'W1', 'category_id': 'C1'}],
    })

    result = app.test_cli_runner().invoke(args=['seed-words', path])

    assert result.exit_code != 0
    assert 'Word 1 is missing required field: word' in result.output
    assert Category.get_by_id('C1') is None
    assert Word.get_by_id('W1') is None


def test_seed_rejects_non_object_rows(app, db, tmp_path):
    path = _write_seed(tmp_path, {'categories': ['fruit']})

    result = app.test_cli_runner().invoke(args=['seed-words', path])

    assert result.exit_code != 0
    assert 'Category 1 must be an object' in result.output


def test_seed_duplicate_ids_report_conflict_and_commit_nothing(app, db, tmp_path):
    from models import Category
    path = _write_seed(tmp_path, {
        'categories': [
            {'id': 'C1', 'name': 'fruit', 'approved': True},
            {'id': 'C1', 'name': 'fruit again', 'approved': True},
        ],
    })

    result = app.test_cli_runner().invoke(args=['seed-words', path])

    assert result.exit_code != 0
    assert 'Seed rows conflict with existing data' in result.output
    assert Category.query.count() == 0


def test_seed_rejects_non_boolean_approved(app, db, tmp_path):
    from models import Category
    path = _write_seed(tmp_path, {
        'categories': [{'id': 'C1', 'name': 'fruit', 'approved': 'false'}],
    })

    result = app.test_cli_runner().invoke(args=['seed-words', path])

    assert result.exit_code != 0
    assert "Category 1 field 'approved' must be true or false" in result.output
    assert Category.get_by_id('C1') is None


def test_seed_rejects_unknown_category(app, db, tmp_path):
    path = _write_seed(tmp_path, {
        'words': [{'word': 'pear', 'category_id': 'nope'}],
    })

    result = app.test_cli_runner().invoke(args=['seed-words', path])

    assert result.exit_code != 0
    assert 'unknown category: nope' in result.output


def test_seed_rejects_invalid_json(app, db, tmp_path):
    path = tmp_path / 'seed.json'
    path.write_text('{not json', encoding='utf-8')

    result = app.test_cli_runner().invoke(args=['seed-words', str(path)])

    assert result.exit_code != 0
    assert 'Invalid JSON' in result.output
