from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    PROJECT_NAME: str = "Noor SEO"
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"

    # Route prefix the web and app clients call
    API_V1_STR: str = "/functions/v1"

    DATABASE_URL: str
    REDIS_URL: str = "redis://localhost:6379/0"

    # Public base URL of this API, used to build the sitemap URL sent to search engines
    API_BASE_URL: str = "http://localhost:8000"

    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    ADMIN_ROLES: str = "admin,super_admin"

    CORS_ORIGINS: str = "*"
    CORS_ALLOW_HEADERS: str = "authorization,x-client-info,apikey,content-type"

    LOG_LEVEL: str = "INFO"

    # Search engine notification
    PING_RATE_LIMIT_MINUTES: int = 10
    GOOGLE_PING_URL: str = "https://www.google.com/ping"
    BING_PING_URL: str = "https://www.bing.com/ping"

    # IndexNow
    INDEXNOW_ENDPOINT: str = "https://api.indexnow.org/indexnow"
    INDEXNOW_SETTING_KEY: str = "indexnow"
    INDEXNOW_AUTO_SUBMIT: bool = False

    OUTBOUND_TIMEOUT_SECONDS: float = 10.0

    # Sitemap
    SITEMAP_CACHE_MAX_AGE: int = 3600

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def cors_headers_list(self) -> List[str]:
        return [h.strip() for h in self.CORS_ALLOW_HEADERS.split(",") if h.strip()]

    @property
    def admin_roles_list(self) -> List[str]:
        return [r.strip() for r in self.ADMIN_ROLES.split(",") if r.strip()]

    @property
    def sitemap_url(self) -> str:
        return f"{self.API_BASE_URL.rstrip('/')}{self.API_V1_STR}/sitemap"


settings = Settings()
