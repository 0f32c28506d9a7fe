import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./audit.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")

    # Audit retention and security monitoring
    AUDIT_RETENTION_DAYS = int(data.get("AUDIT_RETENTION_DAYS", 90))
    MONITOR_INTERVAL_SECONDS = int(data.get("MONITOR_INTERVAL_SECONDS", 60))
    SUSPICIOUS_IP_THRESHOLD = int(data.get("SUSPICIOUS_IP_THRESHOLD", 5))
    SUSPICIOUS_IP_SAMPLE_SIZE = int(data.get("SUSPICIOUS_IP_SAMPLE_SIZE", 1000))
    SUSPICIOUS_IP_WINDOW_HOURS = int(data.get("SUSPICIOUS_IP_WINDOW_HOURS", 24))
    STATS_WINDOW_DAYS = int(data.get("STATS_WINDOW_DAYS", 30))
