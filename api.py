import uvicorn
from config import ApplicationConfig
from audit_service.api.app import create_app
from audit_service.log_config import configure_logging

configure_logging(ApplicationConfig.LOG_LEVEL)

app = create_app(ApplicationConfig)

if __name__ == "__main__":
    uvicorn.run(
        "api:app",
        host=ApplicationConfig.API_HOST,
        port=ApplicationConfig.API_PORT,
        reload=True,
        log_level=ApplicationConfig.LOG_LEVEL.lower(),
    )
