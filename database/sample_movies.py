from database.movie import Movie


SAMPLE_MOVIES = [
    Movie(
        imdb_id='tt4154796',
        title='Avengers: Endgame',
        year=2019,
        rating=8.4,
        is_super_hero=True
    ),
    Movie(
        imdb_id='tt0468569',
        title='The Dark Knight',
        year=2008,
        rating=9.0,
        is_super_hero=True
    ),
    Movie(
        imdb_id='tt0111161',
        title='The Shawshank Redemption',
        year=1994,
        rating=9.3,
        is_super_hero=False
    ),
    Movie(
        imdb_id='tt0068646',
        title='The Godfather',
        year=1972,
        rating=9.2,
        is_super_hero=False
    ),
    Movie(
        imdb_id='tt0133093',
        title='The Matrix',
        year=1999,
        rating=8.7,
        is_super_hero=False
    ),
    Movie(
        imdb_id='tt6751668',
        title='Parasite',
        year=2019,
        rating=8.5,
        is_super_hero=False
    ),
]
