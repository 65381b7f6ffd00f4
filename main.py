import uvicorn

from backoffice.app import create_app
from backoffice.config import Settings

settings = Settings()
app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.PORT)
