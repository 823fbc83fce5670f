"""
Hardcoded catalog contents.

Titles are kept exactly as published in the dataset, spelling included.
"""

from .models import AuthorRecord, BookRecord

BOOKS: tuple[BookRecord, ...] = (
    BookRecord(id="1", name="Name of thw Wind", genre="Fantasy", author_id="1"),
    BookRecord(id="2", name="The Final Empire", genre="Fantasy", author_id="2"),
    BookRecord(id="3", name="The Long Earth", genre="Sci-Fi", author_id="3"),
    BookRecord(id="4", name="The Hero Of Ages", genre="Fantasy", author_id="2"),
    BookRecord(id="5", name="The Colourof Magic", genre="Fantasy", author_id="3"),
    BookRecord(id="6", name="The Loght Fantastic", genre="Fantasy", author_id="3"),
)

AUTHORS: tuple[AuthorRecord, ...] = (
    AuthorRecord(id="1", name="Patrick Bateman", age=29),
    AuthorRecord(id="2", name="Bruce Wayne", age=33),
    AuthorRecord(id="3", name="Peter Parker", age=25),
)
