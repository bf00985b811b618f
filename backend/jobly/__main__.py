import uvicorn

from jobly.config import settings


def main():
    uvicorn.run("jobly.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
