import uvicorn

from kalidict.app import create_app
from kalidict.config import settings

app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
