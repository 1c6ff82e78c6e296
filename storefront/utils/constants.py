"""Application-wide constants."""

APP_NAME = "storefront-config"
APP_DESCRIPTION = "Resolve storefront settings from the environment"

# Environment-file
DEFAULT_ENV_FILE = ".env"

# Server
DEFAULT_PORT = "8080"
DEFAULT_ENV = "development"
PRODUCTION_ENV = "production"

# Database
DEFAULT_DB_HOST = "localhost"
DEFAULT_DB_PORT = "5432"
DEFAULT_DB_USER = "postgres"
DEFAULT_DB_PASSWORD = ""
DEFAULT_DB_NAME = "postgres"
DEFAULT_DB_SSLMODE = "disable"

# Cache (empty URL disables the cache)
DEFAULT_REDIS_URL = ""

# Token issuance
DEFAULT_JWT_SECRET = "secret"
DEFAULT_JWT_EXPIRE_HOURS = "72"

# Object storage (Cloudflare R2)
DEFAULT_R2_ACCOUNT_ID = ""
DEFAULT_R2_ACCESS_KEY_ID = ""
DEFAULT_R2_SECRET_ACCESS_KEY = ""
DEFAULT_R2_BUCKET_NAME = "product-images"
DEFAULT_R2_PUBLIC_URL = ""
R2_ENDPOINT_TEMPLATE = "https://{account_id}.r2.cloudflarestorage.com"

# Logging
REDACTED = "**********"
