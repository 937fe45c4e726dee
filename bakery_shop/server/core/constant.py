"""Static server constants."""

PROJECT_NAME = "Bakery Shop"
API_V1_STR = "/api/v1"
API_VERSION = "0.1.0"
