"""Test environment: in-memory SQLite, fast bcrypt, fixed JWT secret. Must run before app imports."""

import os

os.environ["APP_ENV"] = "dev"
os.environ["DEBUG"] = "false"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-not-for-production"
os.environ["BCRYPT_ROUNDS"] = "4"
