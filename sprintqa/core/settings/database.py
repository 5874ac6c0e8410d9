"""
Database configuration module for Django project.

This module dynamically constructs the DATABASE_URL from environment variables.

Rationale:
    - Environment variables (.env, docker-compose) do not support variable
      interpolation or string concatenation for complex database URLs.
    - Manually composing the DATABASE_URL in Django config keeps all DB
      parameters as simple env variables.
    - Supports switching DB engines (postgresql, sqlite).
"""
import os
import dj_database_url
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Read environment variables for database configuration
DATABASE_URL = os.getenv('DATABASE_URL')
DATABASE_SSL_REQUIRE = (
    os.getenv('DATABASE_SSL_REQUIRE', 'False').lower()
    in ('true', '1', 'yes', 'on')
)
DB_OPTIONS = {}

if not DATABASE_URL:
    db_engine = os.getenv('DB_ENGINE', 'sqlite')

    if db_engine == 'postgresql':
        db_user = os.getenv('PG_USER', 'postgres')
        db_password = os.getenv('PG_PASSWORD', '')
        db_host = os.getenv('PG_HOST', 'localhost')
        db_port = os.getenv('PG_PORT', '5432')
        db_name = os.getenv('PG_DATABASE', 'qaboard')
        DATABASE_URL = (
            f"postgresql://{db_user}:{db_password}@"
            f"{db_host}:{db_port}/"
            f"{db_name}"
        )
    else:
        sqlite_path = os.getenv('SQLITE_PATH', 'db.sqlite3')
        DATABASE_URL = f"sqlite:///{BASE_DIR / sqlite_path}"
        # SQLite doesn't need special timeout options

# Use DATABASE_URL for unified database configuration
DATABASES = {
    'default': dj_database_url.config(
        default=DATABASE_URL,
        ssl_require=DATABASE_SSL_REQUIRE
    )
}

# Connections are handed out by the pool below, never kept per thread
DATABASES['default']['CONN_MAX_AGE'] = 0

if DATABASES['default']['ENGINE'] == 'django.db.backends.postgresql':
    # Bounded psycopg pool shared by all requests. A request waits up to
    # `timeout` seconds for a free connection before failing.
    DB_OPTIONS = {
        'pool': {
            'min_size': int(os.getenv('DB_POOL_MIN_SIZE', '1')),
            'max_size': int(os.getenv('DB_POOL_MAX_SIZE', '20')),
            'timeout': float(os.getenv('DB_POOL_TIMEOUT', '2')),
        },
    }

# Apply database-specific options if defined
if DB_OPTIONS:
    DATABASES['default'].setdefault('OPTIONS', {}).update(DB_OPTIONS)
