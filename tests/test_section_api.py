"""Tests for the load-more JSON endpoint."""

from fastapi.testclient import TestClient


class TestSectionApi:
    def test_trending_movie_page(self, client: TestClient):
        response = client.get("/api/section", params={"section": "trending-movie", "page": 1})
        assert response.status_code == 200
        data = response.json()
        assert data["page"] == 1
        assert data["total_pages"] >= 1
        assert len(data["results"]) == 2
        assert data["results"][0] == {
            "id": 603,
            "title": "The Matrix",
            "media_type": "movie",
            "poster_path": "https://image.tmdb.org/t/p/w500/matrix.jpg",
            "vote_average": 8.2,
            "date": "1999-03-31",
            "slug": "the-matrix",
        }

    def test_trending_tv_items(self, client: TestClient, tmdb):
        data = client.get("/api/section?section=trending-tv&page=2").json()
        assert data["results"][0]["media_type"] == "tv"
        assert data["results"][0]["title"] == "Game of Thrones"
        assert data["results"][0]["date"] == "2011-04-17"
        assert tmdb.calls_to("/trending/tv/week")[-1][1] == {"page": 2}

    def test_popular_movie(self, client: TestClient, tmdb):
        data = client.get("/api/section?section=popular-movie").json()
        assert [r["id"] for r in data["results"]] == [27205, 603]
        assert all(r["media_type"] == "movie" for r in data["results"])
        assert tmdb.calls_to("/movie/popular")[-1][1] == {"page": 1}

    def test_upstream_empty(self, client: TestClient, tmdb):
        tmdb.responses.pop("/trending/movie/week")
        data = client.get("/api/section?section=trending-movie&page=4").json()
        assert data == {"page": 4, "total_pages": 1, "results": []}

    def test_unknown_section_is_400(self, client: TestClient, tmdb):
        response = client.get("/api/section?section=bogus")
        assert response.status_code == 400
        assert response.json() == {"error": "Unknown section"}
        assert tmdb.calls == []

    def test_missing_section_is_400(self, client: TestClient):
        assert client.get("/api/section").status_code == 400

    def test_invalid_page_is_422(self, client: TestClient):
        assert client.get("/api/section?section=trending-tv&page=0").status_code == 422
        assert client.get("/api/section?section=trending-tv&page=501").status_code == 422

    def test_unexpected_error_is_500(self, client: TestClient, tmdb):
        tmdb.responses["/movie/popular"] = RuntimeError("boom")
        response = client.get("/api/section?section=popular-movie")
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch section"}

    def test_locale_is_forwarded(self, client: TestClient, tmdb):
        client.get("/api/section?section=trending-movie", headers={"Cookie": "lang_preference=id"})
        assert tmdb.calls_to("/trending/movie/week")[-1][2] == "id"

    def test_total_pages_capped_at_last_servable_page(self, client: TestClient, tmdb):
        tmdb.responses["/movie/popular"] = lambda params: {
            "page": params["page"],
            "total_pages": 44000,
            "results": [{"id": 603, "title": "The Matrix"}],
        }
        data = client.get("/api/section?section=popular-movie&page=500").json()
        assert data["page"] == 500
        assert data["total_pages"] == 500

        data = client.get("/api/section?section=popular-movie&page=2").json()
        assert data["total_pages"] == 500
