"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real AWS account
os.environ.setdefault("PLANT_STORE", "memory")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("API_BEARER_TOKEN", "")
