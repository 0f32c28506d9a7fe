"""Allow running as: python -m audit_service"""

from audit_service.cli.main import app

if __name__ == "__main__":
    app()
