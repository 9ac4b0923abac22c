from __future__ import annotations

from malojapy.adapters.maloja import ScrobblesQuery, full_query_path, to_query_string


def test_empty_query_serializes_to_empty_string() -> None:
    assert to_query_string(ScrobblesQuery()) == ""


def test_empty_query_leaves_path_unchanged() -> None:
    path = "http://localhost:42010/apis/mlj_1/scrobbles"

    assert full_query_path(ScrobblesQuery(), path) == path


def test_query_uses_wire_names_in_field_order() -> None:
    query = ScrobblesQuery(from_=1000, until=2000, artist="Artist B", page=0, perpage=50)

    assert to_query_string(query) == "from=1000&until=2000&artist=Artist+B&page=0&perpage=50"


def test_relative_token_is_sent_as_in() -> None:
    query = ScrobblesQuery(in_="month")

    path = full_query_path(query, "/apis/mlj_1/numscrobbles")

    assert path == "/apis/mlj_1/numscrobbles?in=month"


def test_query_escapes_reserved_characters() -> None:
    query = ScrobblesQuery(artist="Simon & Garfunkel")

    assert to_query_string(query) == "artist=Simon+%26+Garfunkel"
