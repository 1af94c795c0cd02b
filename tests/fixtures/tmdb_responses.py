"""
Mock TMDB API responses for testing.

Contains realistic responses from the TMDB movie list and genre endpoints.
These fixtures are used with respx to mock httpx calls, and as payloads of
fake network sources in repository tests.
"""

# GET /movie/popular?page=1
TMDB_POPULAR_PAGE_1 = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "backdrop_path": "/s3TBrRGB1iav7gFOCNx3H31MoES.jpg",
            "genre_ids": [28, 12],
            "id": 1,
            "original_language": "en",
            "original_title": "Avatar",
            "overview": "A paraplegic Marine dispatched to the moon Pandora...",
            "popularity": 456.92,
            "poster_path": "/jRXYjXNq0Cs2TcJjLkki24MLp7u.jpg",
            "release_date": "2009-12-15",
            "title": "Avatar",
            "video": False,
            "vote_average": 7.6,
            "vote_count": 27000,
        },
        {
            "adult": False,
            "backdrop_path": "/7BIwGH0WAEN3tQsB1X5HnVjj2bR.jpg",
            "genre_ids": [28],
            "id": 2,
            "original_language": "en",
            "original_title": "Mad Max: Fury Road",
            "overview": "An apocalyptic story set in the furthest reaches of our planet...",
            "popularity": 123.4,
            "poster_path": "/hA2ple9q4qnwxp3hKVNhroipsir.jpg",
            "release_date": "2015-05-13",
            "title": "Mad Max: Fury Road",
            "video": False,
            "vote_average": 7.6,
            "vote_count": 22000,
        },
    ],
    "total_pages": 3,
    "total_results": 50,
}

# GET /movie/top_rated?page=1 (film 1 avec des valeurs plus recentes)
TMDB_TOP_RATED_PAGE_1 = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "backdrop_path": "/s3TBrRGB1iav7gFOCNx3H31MoES.jpg",
            "genre_ids": [28, 12, 14],
            "id": 1,
            "original_language": "en",
            "original_title": "Avatar",
            "overview": "Updated overview.",
            "popularity": 500.0,
            "poster_path": "/newPoster.jpg",
            "release_date": "2009-12-15",
            "title": "Avatar (Remastered)",
            "video": False,
            "vote_average": 7.9,
            "vote_count": 30000,
        },
    ],
    "total_pages": 1,
    "total_results": 1,
}

# GET /movie/upcoming?page=1 (date inconnue et champs minimaux)
TMDB_UPCOMING_MINIMAL = {
    "page": 1,
    "results": [
        {
            "id": 99,
            "title": "",
            "original_title": "Untitled Project",
            "release_date": "",
            "genre_ids": [],
        },
    ],
    "total_pages": 1,
    "total_results": 1,
}

# GET /movie/popular?page=4 (au-dela de la derniere page)
TMDB_PAGE_BEYOND_LAST = {
    "page": 4,
    "results": [],
    "total_pages": 3,
    "total_results": 50,
}

# Reponse mal formee : "results" absent
TMDB_MALFORMED_RESPONSE = {
    "page": 1,
    "status_message": "unexpected payload",
}

# GET /genre/movie/list
TMDB_GENRE_LIST = {
    "genres": [
        {"id": 28, "name": "Action"},
        {"id": 12, "name": "Adventure"},
        {"id": 14, "name": "Fantasy"},
    ]
}

# 401 TMDB
TMDB_UNAUTHORIZED = {
    "status_code": 7,
    "status_message": "Invalid API key: You must be granted a valid key.",
    "success": False,
}
