import os
from pathlib import Path

# Paths
BASE_DIR = Path(__file__).resolve().parent.parent
BLOG_DIR = Path(os.getenv("BLOG_DIR", BASE_DIR / "blog"))
INDEX_NAME = "index.html"

# Site metadata
SITE_AUTHOR = os.getenv("SITE_AUTHOR", "htmlblog")
SITE_HOST = os.getenv("SITE_HOST", "admin@htmlblog")
BLOG_URL = os.getenv("BLOG_URL", "/blog/")

# Auth / tokens
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
PASSWORD_HASH = os.getenv("BLOG_PASSWORD_HASH")
TOKEN_SALT = "htmlblog-admin"
TOKEN_MAX_AGE = 24 * 60 * 60

# Server
API_PREFIX = os.getenv("API_PREFIX", "/api/blog")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
