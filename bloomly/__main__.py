# bloomly/__main__.py
import uvicorn

from bloomly.config import settings


def run():
    uvicorn.run("bloomly.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
