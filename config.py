import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    FLASK_HOST = os.getenv('FLASK_HOST', '0.0.0.0')
    FLASK_PORT = int(os.getenv('FLASK_PORT', '2565'))
    FLASK_DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()


    # 'memory' or 'postgres'
    STORAGE_BACKEND = os.getenv('STORAGE_BACKEND', 'memory').lower()
    SEED_SAMPLE_MOVIES = os.getenv('SEED_SAMPLE_MOVIES', 'False').lower() == 'true'


    POSTGRES_HOST = os.getenv('POSTGRES_HOST', 'localhost')
    POSTGRES_PORT = int(os.getenv('POSTGRES_PORT', '5432'))
    POSTGRES_DB = os.getenv('POSTGRES_DB', 'movies')
    POSTGRES_USER = os.getenv('POSTGRES_USER', 'postgres')
    POSTGRES_PASSWORD = os.getenv('POSTGRES_PASSWORD', 'postgres')
    POSTGRES_SSLMODE = os.getenv('POSTGRES_SSLMODE', 'prefer')
    POSTGRES_CONNECT_TIMEOUT = int(os.getenv('POSTGRES_CONNECT_TIMEOUT', '5'))
