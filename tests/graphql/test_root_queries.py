"""
Schema-level tests for the root query type
"""

import pytest

from bookshelf.graphql.schema import print_schema, schema, validate_schema


def execute(document, variables=None, context=None):
    result = schema.execute_sync(document, variable_values=variables, context_value=context)
    assert result.errors is None, result.errors
    return result.data


def test_schema_validates():
    validate_schema()


def test_type_names():
    sdl = print_schema()

    assert "type RootQuery" in sdl
    assert "type Book" in sdl
    assert "type Author" in sdl
    assert "book(id: ID" in sdl
    assert "author(id: ID" in sdl


def test_books_returns_full_dataset():
    data = execute("{ books { id name genre authorId } }")

    assert data["books"] == [
        {"id": "1", "name": "Name of thw Wind", "genre": "Fantasy", "authorId": "1"},
        {"id": "2", "name": "The Final Empire", "genre": "Fantasy", "authorId": "2"},
        {"id": "3", "name": "The Long Earth", "genre": "Sci-Fi", "authorId": "3"},
        {"id": "4", "name": "The Hero Of Ages", "genre": "Fantasy", "authorId": "2"},
        {"id": "5", "name": "The Colourof Magic", "genre": "Fantasy", "authorId": "3"},
        {"id": "6", "name": "The Loght Fantastic", "genre": "Fantasy", "authorId": "3"},
    ]


def test_authors_returns_full_dataset():
    data = execute("{ authors { id name age } }")

    assert data["authors"] == [
        {"id": "1", "name": "Patrick Bateman", "age": 29},
        {"id": "2", "name": "Bruce Wayne", "age": 33},
        {"id": "3", "name": "Peter Parker", "age": 25},
    ]


def test_author_by_id():
    data = execute('{ author(id: "2") { name age } }')

    assert data["author"] == {"name": "Bruce Wayne", "age": 33}


def test_book_author():
    data = execute('{ book(id: "3") { name author { id name } } }')

    assert data["book"] == {
        "name": "The Long Earth",
        "author": {"id": "3", "name": "Peter Parker"},
    }


def test_author_books_in_order():
    data = execute('{ author(id: "3") { book { id authorId } } }')

    assert data["author"]["book"] == [
        {"id": "3", "authorId": "3"},
        {"id": "5", "authorId": "3"},
        {"id": "6", "authorId": "3"},
    ]


@pytest.mark.parametrize("field", ["book", "author"])
def test_unknown_id_is_null(field):
    data = execute(f'{{ {field}(id: "999") {{ id }} }}')

    assert data[field] is None


def test_missing_id_argument_is_null():
    data = execute("{ book { id } author { id } }")

    assert data == {"book": None, "author": None}


def test_integer_id_literal_is_accepted():
    data = execute("{ book(id: 4) { name } }")

    assert data["book"] == {"name": "The Hero Of Ages"}


def test_id_variable():
    data = execute(
        "query BookById($id: ID) { book(id: $id) { name } }",
        variables={"id": "2"},
    )

    assert data["book"] == {"name": "The Final Empire"}


def test_every_book_author_matches_reference():
    data = execute("{ books { authorId author { id } } }")

    for book in data["books"]:
        assert book["author"]["id"] == book["authorId"]


def test_every_author_book_set_matches_filter():
    data = execute("{ books { id authorId } authors { id book { id authorId } } }")

    for author in data["authors"]:
        expected = [b for b in data["books"] if b["authorId"] == author["id"]]
        assert author["book"] == expected


def test_dangling_author_is_null(dangling_catalog):
    data = execute(
        "{ books { id author { name } } }",
        context={"catalog": dangling_catalog},
    )

    assert data["books"] == [
        {"id": "10", "author": None},
        {"id": "11", "author": {"name": "Ada Example"}},
    ]


def test_invalid_argument_type_is_rejected():
    result = schema.execute_sync('{ book(id: ["1"]) { id } }')

    assert result.errors
    assert result.data is None
