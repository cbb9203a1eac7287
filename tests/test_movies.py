"""Movie catalog endpoint tests."""

import pytest


@pytest.fixture
def movies(client):
    """Seed a few movies and return their ids keyed by title."""
    seeded = {}
    for title, director, year in [
        ("Inception", "Christopher Nolan", 2010),
        ("Interstellar", "Christopher Nolan", 2014),
        ("Arrival", "Denis Villeneuve", 2016),
    ]:
        response = client.post(
            "/movie", json={"title": title, "director": director, "release_year": year}
        )
        assert response.status_code == 201
        seeded[title] = response.json()["id"]
    return seeded


def test_create_movie(client):
    """Test creating a movie."""
    response = client.post(
        "/movie", json={"title": "Heat", "director": "Michael Mann", "release_year": 1995}
    )
    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "Heat"
    assert data["director"] == "Michael Mann"
    assert data["release_year"] == 1995


def test_create_movie_title_only(client):
    """Test director and release year are optional."""
    response = client.post("/movie", json={"title": "Untitled"})
    assert response.status_code == 201
    assert response.json()["director"] is None
    assert response.json()["release_year"] is None


def test_create_movie_requires_title(client):
    """Test creating a movie without a title is a bad request."""
    response = client.post("/movie", json={"director": "Nobody"})
    assert response.status_code == 400


def test_get_movie(client, movies):
    """Test getting a movie by id."""
    response = client.get(f"/movie/{movies['Arrival']}")
    assert response.status_code == 200
    assert response.json()["title"] == "Arrival"


def test_get_movie_not_found(client):
    """Test getting a missing movie."""
    response = client.get("/movie/99999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Movie not found"


def test_list_movies_requires_auth(client, movies):
    """Test the movie listing is protected."""
    response = client.get("/movies")
    assert response.status_code == 401


def test_list_movies(client, auth_headers, movies):
    """Test listing all movies."""
    response = client.get("/movies", headers=auth_headers)
    assert response.status_code == 200
    assert len(response.json()) == 3


def test_list_movies_search_title(client, auth_headers, movies):
    """Test substring search on title."""
    response = client.get("/movies", headers=auth_headers, params={"search": "ter"})
    assert response.status_code == 200
    assert [m["title"] for m in response.json()] == ["Interstellar"]


def test_list_movies_filter_director(client, auth_headers, movies):
    """Test exact match on director."""
    response = client.get(
        "/movies", headers=auth_headers, params={"director": "Christopher Nolan"}
    )
    assert response.status_code == 200
    assert {m["title"] for m in response.json()} == {"Inception", "Interstellar"}

    partial = client.get("/movies", headers=auth_headers, params={"director": "Nolan"})
    assert partial.json() == []


def test_list_movies_sorted(client, auth_headers, movies):
    """Test sorting by an allowed column."""
    response = client.get("/movies", headers=auth_headers, params={"sortBy": "title"})
    assert response.status_code == 200
    assert [m["title"] for m in response.json()] == ["Arrival", "Inception", "Interstellar"]


def test_list_movies_sorted_by_year(client, auth_headers, movies):
    """Test sorting combined with a filter."""
    response = client.get(
        "/movies",
        headers=auth_headers,
        params={"sortBy": "release_year", "director": "Christopher Nolan"},
    )
    assert [m["release_year"] for m in response.json()] == [2010, 2014]


def test_list_movies_invalid_sort_is_ignored(client, auth_headers, movies):
    """Test an unknown sort column is ignored rather than rejected."""
    response = client.get(
        "/movies", headers=auth_headers, params={"sortBy": "title; DROP TABLE movies"}
    )
    assert response.status_code == 200
    assert len(response.json()) == 3


def test_update_movie(client, movies):
    """Test updating a movie replaces its fields."""
    response = client.patch(
        f"/movie/{movies['Inception']}",
        json={"title": "Inception (2010)", "release_year": 2010},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Inception (2010)"
    assert data["director"] is None
    assert data["release_year"] == 2010


def test_update_movie_with_put(client, movies):
    """Test PUT behaves like PATCH."""
    response = client.put(
        f"/movie/{movies['Arrival']}",
        json={"title": "Arrival", "director": "D. Villeneuve", "release_year": 2016},
    )
    assert response.status_code == 200
    assert response.json()["director"] == "D. Villeneuve"


def test_update_movie_requires_title(client, movies):
    """Test updating without a title is a bad request."""
    response = client.patch(f"/movie/{movies['Arrival']}", json={"director": "Someone"})
    assert response.status_code == 400


def test_update_movie_not_found(client):
    """Test updating a missing movie."""
    response = client.patch("/movie/99999", json={"title": "Ghost"})
    assert response.status_code == 404


def test_delete_movie(client, movies):
    """Test deleting a movie."""
    response = client.delete(f"/movie/{movies['Arrival']}")
    assert response.status_code == 200
    assert response.json()["message"] == "Movie deleted successfully"

    assert client.get(f"/movie/{movies['Arrival']}").status_code == 404


def test_delete_movie_not_found(client):
    """Test deleting a missing movie."""
    response = client.delete("/movie/99999")
    assert response.status_code == 404
