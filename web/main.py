"""Web application entry point"""

import uvicorn

from config import settings

if __name__ == "__main__":
    uvicorn.run(
        "web.api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
        log_level="info"
    )
